"""Update Conversation Command - creator-only merge of name/description."""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.application.services.view_assembler import ConversationView, ViewAssembler
from roomchat.domain.exceptions import ConversationNotFoundError
from roomchat.domain.ports.repositories import ConversationRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class UpdateConversationCommand(Command[ConversationView]):
    conversation_id: ConversationId
    user_id: UserId
    # Only keys present here are changed
    changes: Mapping[str, Optional[str]] = field(default_factory=dict)


class UpdateConversationHandler(CommandHandler[ConversationView]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
        uow: UnitOfWork,
    ):
        self._conversation_repository = conversation_repository
        self._authorization = authorization
        self._view_assembler = view_assembler
        self._uow = uow

    async def execute(self, command: UpdateConversationCommand) -> ConversationView:
        await self._authorization.ensure_creator(command.conversation_id, command.user_id)

        conversation = await self._conversation_repository.get_by_id(
            command.conversation_id
        )
        if not conversation:
            raise ConversationNotFoundError()

        if command.changes:
            conversation.update_details(command.changes)
            await self._conversation_repository.update(conversation)
            await self._uow.commit()

        return await self._view_assembler.conversation_view(conversation)
