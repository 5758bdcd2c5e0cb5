"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from roomchat.domain.entities.user import User
from roomchat.domain.entities.access_token import AccessToken, TokenType
from roomchat.domain.entities.conversation import Conversation
from roomchat.domain.entities.participant import Participant
from roomchat.domain.entities.message import Message

__all__ = [
    "User",
    "AccessToken",
    "TokenType",
    "Conversation",
    "Participant",
    "Message",
]
