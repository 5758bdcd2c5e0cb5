"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (SQLAlchemy, in-memory, etc.)

Mutating methods stage changes in the current transaction; the caller
commits through UnitOfWork.
"""

from roomchat.domain.ports.repositories.user_repository import UserRepository
from roomchat.domain.ports.repositories.access_token_repository import AccessTokenRepository
from roomchat.domain.ports.repositories.conversation_repository import ConversationRepository
from roomchat.domain.ports.repositories.participant_repository import ParticipantRepository
from roomchat.domain.ports.repositories.message_repository import MessageRepository

__all__ = [
    "UserRepository",
    "AccessTokenRepository",
    "ConversationRepository",
    "ParticipantRepository",
    "MessageRepository",
]
