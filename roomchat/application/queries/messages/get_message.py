"""GetMessage Query."""

from dataclasses import dataclass

from roomchat.application.common.interfaces import Query, QueryHandler
from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.application.services.view_assembler import MessageView, ViewAssembler
from roomchat.domain.exceptions import MessageNotFoundError
from roomchat.domain.ports.repositories import ConversationRepository, MessageRepository
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetMessageQuery(Query[MessageView]):
    message_id: MessageId
    user_id: UserId


class GetMessageHandler(QueryHandler[MessageView]):
    def __init__(
        self,
        message_repository: MessageRepository,
        conversation_repository: ConversationRepository,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
    ):
        self._message_repository = message_repository
        self._conversation_repository = conversation_repository
        self._authorization = authorization
        self._view_assembler = view_assembler

    async def execute(self, query: GetMessageQuery) -> MessageView:
        message = await self._message_repository.get_by_id(query.message_id)
        if not message:
            raise MessageNotFoundError()

        await self._authorization.ensure_participant(
            message.conversation_id, query.user_id
        )

        conversation = await self._conversation_repository.get_by_id(
            message.conversation_id
        )
        return await self._view_assembler.message_view(message, conversation=conversation)
