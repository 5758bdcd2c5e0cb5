"""
Persistence Layer - Database implementations.

Contains SQLAlchemy (async) repository implementations for domain ports.
"""

from roomchat.infrastructure.persistence.database import (
    Base,
    create_engine,
    create_schema,
    create_session_factory,
)
from roomchat.infrastructure.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from roomchat.infrastructure.persistence.sqlalchemy_access_token_repository import (
    SqlAlchemyAccessTokenRepository,
)
from roomchat.infrastructure.persistence.sqlalchemy_conversation_repository import (
    SqlAlchemyConversationRepository,
)
from roomchat.infrastructure.persistence.sqlalchemy_participant_repository import (
    SqlAlchemyParticipantRepository,
)
from roomchat.infrastructure.persistence.sqlalchemy_message_repository import (
    SqlAlchemyMessageRepository,
)
from roomchat.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "Base",
    "create_engine",
    "create_schema",
    "create_session_factory",
    "SqlAlchemyUserRepository",
    "SqlAlchemyAccessTokenRepository",
    "SqlAlchemyConversationRepository",
    "SqlAlchemyParticipantRepository",
    "SqlAlchemyMessageRepository",
    "SqlAlchemyUnitOfWork",
]
