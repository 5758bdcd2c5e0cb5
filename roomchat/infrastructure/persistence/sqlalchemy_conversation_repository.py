"""
SQLAlchemy Conversation Repository Implementation.

Mapping:
- ORM row fields: id, name, description, created_by, created_at, updated_at
- Domain entity: Conversation with value objects (ConversationId, UserId)

Deleting a conversation removes its messages and roster in the same
transaction; the ON DELETE CASCADE foreign keys say the same thing at the
schema level.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from roomchat.domain.entities.conversation import Conversation
from roomchat.domain.ports.repositories import ConversationRepository
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId
from roomchat.infrastructure.persistence.database import as_utc
from roomchat.infrastructure.persistence.models import (
    ConversationModel,
    MessageModel,
    ParticipantModel,
)

logger = logging.getLogger(__name__)


class SqlAlchemyConversationRepository(ConversationRepository):
    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, record: ConversationModel) -> Conversation:
        """Map ORM row to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            created_by=UserId(record.created_by),
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
            name=record.name,
            description=record.description,
        )

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        """Get conversation by ID."""
        record = await self._session.get(ConversationModel, conversation_id.value)
        return self._to_entity(record) if record else None

    async def get_by_participant(self, user_id: UserId) -> list[Conversation]:
        """Get conversations the user belongs to, newest created first."""
        result = await self._session.execute(
            select(ConversationModel)
            .join(
                ParticipantModel,
                ParticipantModel.conversation_id == ConversationModel.id,
            )
            .where(ParticipantModel.user_id == user_id.value)
            .order_by(ConversationModel.created_at.desc(), ConversationModel.id.desc())
        )
        return [self._to_entity(record) for record in result.scalars().all()]

    async def add(self, conversation: Conversation) -> None:
        self._session.add(
            ConversationModel(
                id=conversation.id.value,
                name=conversation.name,
                description=conversation.description,
                created_by=conversation.created_by.value,
                created_at=conversation.created_at,
                updated_at=conversation.updated_at,
            )
        )
        await self._session.flush()

    async def update(self, conversation: Conversation) -> None:
        record = await self._session.get(ConversationModel, conversation.id.value)
        if record is None:
            raise LookupError(f"Conversation {conversation.id.value} does not exist")

        record.name = conversation.name
        record.description = conversation.description
        record.updated_at = conversation.updated_at
        await self._session.flush()

    async def delete(self, conversation_id: ConversationId) -> bool:
        """Delete conversation by ID. Returns True if deleted."""
        messages = await self._session.execute(
            delete(MessageModel).where(
                MessageModel.conversation_id == conversation_id.value
            )
        )
        participants = await self._session.execute(
            delete(ParticipantModel).where(
                ParticipantModel.conversation_id == conversation_id.value
            )
        )
        result = await self._session.execute(
            delete(ConversationModel).where(ConversationModel.id == conversation_id.value)
        )
        logger.debug(
            f"[conversation_repository] Cascade for {conversation_id.value}: "
            f"{messages.rowcount} messages, {participants.rowcount} participants"
        )
        return result.rowcount > 0
