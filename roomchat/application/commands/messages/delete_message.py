"""Delete Message Command - author only; replies survive with reply_to_id cleared."""

import logging
from dataclasses import dataclass

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.domain.exceptions import MessageNotFoundError, NotMessageOwnerError
from roomchat.domain.ports.repositories import MessageRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteMessageCommand(Command[None]):
    message_id: MessageId
    user_id: UserId


class DeleteMessageHandler(CommandHandler[None]):
    def __init__(
        self,
        message_repository: MessageRepository,
        authorization: ConversationAuthorizationService,
        uow: UnitOfWork,
    ):
        self._message_repository = message_repository
        self._authorization = authorization
        self._uow = uow

    async def execute(self, command: DeleteMessageCommand) -> None:
        message = await self._message_repository.get_by_id(command.message_id)
        if not message:
            raise MessageNotFoundError()

        if not message.is_authored_by(command.user_id):
            raise NotMessageOwnerError("You can only delete your own messages")

        await self._authorization.ensure_participant(
            message.conversation_id, command.user_id
        )

        await self._message_repository.delete(message.id)
        await self._uow.commit()
        logger.info(f"[messages] Deleted {message.id.value}")
