"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from roomchat.domain.value_objects.user_id import UserId
from roomchat.domain.value_objects.user_email import UserEmail
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.token_id import TokenId

__all__ = [
    "UserId",
    "UserEmail",
    "ConversationId",
    "MessageId",
    "TokenId",
]
