"""Delete Conversation Command."""

import logging
from dataclasses import dataclass

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.domain.ports.repositories import ConversationRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteConversationCommand(Command[bool]):
    conversation_id: ConversationId
    user_id: UserId


class DeleteConversationHandler(CommandHandler[bool]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        authorization: ConversationAuthorizationService,
        uow: UnitOfWork,
    ):
        self._conversation_repository = conversation_repository
        self._authorization = authorization
        self._uow = uow

    async def execute(self, command: DeleteConversationCommand) -> bool:
        await self._authorization.ensure_creator(command.conversation_id, command.user_id)

        deleted = await self._conversation_repository.delete(command.conversation_id)
        await self._uow.commit()

        logger.info(f"[conversations] Deleted {command.conversation_id.value}")
        return deleted
