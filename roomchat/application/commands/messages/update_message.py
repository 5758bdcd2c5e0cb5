"""
Update Message Command.

Authorship is the primary gate; the author must also still be a participant.
Every successful edit stamps edited_at.
"""

from dataclasses import dataclass

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.application.services.view_assembler import MessageView, ViewAssembler
from roomchat.domain.exceptions import MessageNotFoundError, NotMessageOwnerError
from roomchat.domain.ports.repositories import MessageRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class UpdateMessageCommand(Command[MessageView]):
    message_id: MessageId
    user_id: UserId
    content: str


class UpdateMessageHandler(CommandHandler[MessageView]):
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

    async def execute(self, command: UpdateMessageCommand) -> MessageView:
        message = await self._message_repository.get_by_id(command.message_id)
        if not message:
            raise MessageNotFoundError()

        if not message.is_authored_by(command.user_id):
            raise NotMessageOwnerError("You can only edit your own messages")

        await self._authorization.ensure_participant(
            message.conversation_id, command.user_id
        )

        message.edit(command.content)
        await self._message_repository.update(message)
        await self._uow.commit()

        return await self._view_assembler.message_view(message)
