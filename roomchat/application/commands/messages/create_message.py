"""
Create Message Command.

Handler:
1. Verify the caller participates in the conversation
2. If replying, verify the target exists and lives in the same conversation
3. Save the message (content is trimmed and must not be blank)
4. Return the message with author and reply preview
"""

import logging
from dataclasses import dataclass
from typing import Optional

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.application.services.view_assembler import MessageView, ViewAssembler
from roomchat.domain.entities.message import Message
from roomchat.domain.exceptions import (
    ReplyTargetCrossConversationError,
    ReplyTargetNotFoundError,
)
from roomchat.domain.ports.repositories import MessageRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateMessageCommand(Command[MessageView]):
    conversation_id: ConversationId
    user_id: UserId
    content: str
    reply_to_id: Optional[MessageId] = None


class CreateMessageHandler(CommandHandler[MessageView]):
    def __init__(
        self,
        message_repository: MessageRepository,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
        uow: UnitOfWork,
    ):
        self._message_repository = message_repository
        self._authorization = authorization
        self._view_assembler = view_assembler
        self._uow = uow

    async def execute(self, command: CreateMessageCommand) -> MessageView:
        await self._authorization.ensure_participant(
            command.conversation_id, command.user_id
        )

        if command.reply_to_id:
            target = await self._message_repository.get_by_id(command.reply_to_id)
            if not target:
                raise ReplyTargetNotFoundError()
            if target.conversation_id != command.conversation_id:
                logger.warning(
                    f"[messages] Cross-conversation reply rejected: "
                    f"{command.reply_to_id.value} is in {target.conversation_id.value}"
                )
                raise ReplyTargetCrossConversationError()

        message = Message.create(
            conversation_id=command.conversation_id,
            user_id=command.user_id,
            content=command.content,
            reply_to_id=command.reply_to_id,
        )
        await self._message_repository.add(message)
        await self._uow.commit()

        return await self._view_assembler.message_view(message)
