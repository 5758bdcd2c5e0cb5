"""
SQLAlchemy Participant Repository Implementation.

The UNIQUE(conversation_id, user_id) constraint is the final arbiter for
concurrent inserts: a check-then-insert race loses at flush time and is
reported as AlreadyParticipantError.
"""

import logging
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roomchat.domain.entities.participant import Participant
from roomchat.domain.exceptions import (
    AlreadyParticipantError,
    ConversationNotFoundError,
    InvalidParticipantError,
    UserNotFoundError,
)
from roomchat.domain.ports.repositories import ParticipantRepository
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId
from roomchat.infrastructure.persistence.database import as_utc
from roomchat.infrastructure.persistence.models import (
    ConversationModel,
    ParticipantModel,
    UserModel,
)

logger = logging.getLogger(__name__)


class SqlAlchemyParticipantRepository(ParticipantRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, record: ParticipantModel) -> Participant:
        return Participant(
            id=record.id,
            conversation_id=ConversationId(record.conversation_id),
            user_id=UserId(record.user_id),
            joined_at=as_utc(record.joined_at),
        )

    def _to_record(self, participant: Participant) -> ParticipantModel:
        return ParticipantModel(
            id=participant.id,
            conversation_id=participant.conversation_id.value,
            user_id=participant.user_id.value,
            joined_at=participant.joined_at,
        )

    async def get(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]:
        result = await self._session.execute(
            select(ParticipantModel).where(
                ParticipantModel.conversation_id == conversation_id.value,
                ParticipantModel.user_id == user_id.value,
            )
        )
        record = result.scalars().first()
        return self._to_entity(record) if record else None

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Participant]:
        result = await self._session.execute(
            select(ParticipantModel)
            .where(ParticipantModel.conversation_id == conversation_id.value)
            .order_by(ParticipantModel.joined_at.asc(), ParticipantModel.id.asc())
        )
        return [self._to_entity(record) for record in result.scalars().all()]

    async def add(self, participant: Participant) -> None:
        self._session.add(self._to_record(participant))
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            # Decide from the committed state which constraint rejected the row
            if await self.get(participant.conversation_id, participant.user_id):
                logger.warning(
                    f"[participant_repository] Unique constraint rejected "
                    f"({participant.conversation_id.value}, {participant.user_id.value})"
                )
                raise AlreadyParticipantError() from e
            if await self._session.get(UserModel, participant.user_id.value) is None:
                raise UserNotFoundError() from e
            if (
                await self._session.get(
                    ConversationModel, participant.conversation_id.value
                )
                is None
            ):
                raise ConversationNotFoundError() from e
            raise

    async def add_many(self, participants: list[Participant]) -> None:
        self._session.add_all([self._to_record(p) for p in participants])
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise InvalidParticipantError() from e

    async def delete(self, participant: Participant) -> None:
        await self._session.execute(
            delete(ParticipantModel).where(ParticipantModel.id == participant.id)
        )
