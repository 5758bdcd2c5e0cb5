"""
Add Participant Command.

Any current participant may add another user. The pre-checks give precise
errors for the common case; a concurrent add of the same pair is caught by
the roster's uniqueness constraint and reported the same way.
"""

import logging
from dataclasses import dataclass

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.domain.entities.participant import Participant
from roomchat.domain.exceptions import AlreadyParticipantError, UserNotFoundError
from roomchat.domain.ports.repositories import ParticipantRepository, UserRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddParticipantCommand(Command[Participant]):
    conversation_id: ConversationId
    user_id: UserId
    target_user_id: UserId


class AddParticipantHandler(CommandHandler[Participant]):
    def __init__(
        self,
        participant_repository: ParticipantRepository,
        user_repository: UserRepository,
        authorization: ConversationAuthorizationService,
        uow: UnitOfWork,
    ):
        self._participant_repository = participant_repository
        self._user_repository = user_repository
        self._authorization = authorization
        self._uow = uow

    async def execute(self, command: AddParticipantCommand) -> Participant:
        await self._authorization.ensure_participant(
            command.conversation_id, command.user_id
        )

        existing = await self._participant_repository.get(
            command.conversation_id, command.target_user_id
        )
        if existing:
            raise AlreadyParticipantError()

        if not await self._user_repository.get_by_id(command.target_user_id):
            raise UserNotFoundError()

        participant = Participant.join(command.conversation_id, command.target_user_id)
        await self._participant_repository.add(participant)
        await self._uow.commit()

        logger.info(
            f"[conversations] {command.user_id.value} added {command.target_user_id.value} "
            f"to {command.conversation_id.value}"
        )
        return participant
