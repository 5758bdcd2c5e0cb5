"""
Remove Participant Command.

Any participant may remove any other participant, the creator included.
"""

import logging
from dataclasses import dataclass

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.domain.exceptions import ParticipantNotFoundError
from roomchat.domain.ports.repositories import ParticipantRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoveParticipantCommand(Command[None]):
    conversation_id: ConversationId
    user_id: UserId
    target_user_id: UserId


class RemoveParticipantHandler(CommandHandler[None]):
    def __init__(
        self,
        participant_repository: ParticipantRepository,
        authorization: ConversationAuthorizationService,
        uow: UnitOfWork,
    ):
        self._participant_repository = participant_repository
        self._authorization = authorization
        self._uow = uow

    async def execute(self, command: RemoveParticipantCommand) -> None:
        await self._authorization.ensure_participant(
            command.conversation_id, command.user_id
        )

        participant = await self._participant_repository.get(
            command.conversation_id, command.target_user_id
        )
        if not participant:
            raise ParticipantNotFoundError()

        await self._participant_repository.delete(participant)
        await self._uow.commit()

        logger.info(
            f"[conversations] {command.user_id.value} removed {command.target_user_id.value} "
            f"from {command.conversation_id.value}"
        )
