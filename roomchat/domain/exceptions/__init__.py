"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by
the presentation layer, which maps each base class to an HTTP status code.
"""

from roomchat.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    ConversationNotFoundError,
    MessageNotFoundError,
    UserNotFoundError,
    ParticipantNotFoundError,
    ReplyTargetNotFoundError,
)
from roomchat.domain.exceptions.access_denied import (
    AccessDeniedError,
    NotAParticipantError,
    NotCreatorError,
    NotMessageOwnerError,
)
from roomchat.domain.exceptions.validation_error import DomainValidationError
from roomchat.domain.exceptions.invalid_operation import (
    InvalidOperationError,
    AlreadyParticipantError,
    InvalidParticipantError,
    ReplyTargetCrossConversationError,
)
from roomchat.domain.exceptions.authentication import (
    AuthenticationError,
    InvalidCredentialsError,
    InvalidTokenError,
)

__all__ = [
    "EntityNotFoundError",
    "ConversationNotFoundError",
    "MessageNotFoundError",
    "UserNotFoundError",
    "ParticipantNotFoundError",
    "ReplyTargetNotFoundError",
    "AccessDeniedError",
    "NotAParticipantError",
    "NotCreatorError",
    "NotMessageOwnerError",
    "DomainValidationError",
    "InvalidOperationError",
    "AlreadyParticipantError",
    "InvalidParticipantError",
    "ReplyTargetCrossConversationError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
]
