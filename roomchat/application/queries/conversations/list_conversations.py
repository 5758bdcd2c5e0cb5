"""List Conversations Query."""

from dataclasses import dataclass

from roomchat.application.common.interfaces import Query, QueryHandler
from roomchat.application.services.view_assembler import ConversationView, ViewAssembler
from roomchat.domain.ports.repositories import ConversationRepository
from roomchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[ConversationView]]):
    user_id: UserId


class ListConversationsHandler(QueryHandler[list[ConversationView]]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        view_assembler: ViewAssembler,
    ):
        self._conversation_repository = conversation_repository
        self._view_assembler = view_assembler

    async def execute(self, query: ListConversationsQuery) -> list[ConversationView]:
        conversations = await self._conversation_repository.get_by_participant(
            query.user_id
        )
        return await self._view_assembler.conversation_views(conversations)
