"""
GetConversation Query - one conversation with creator and roster.

Unlike the other participant-gated paths, this one reports a missing
conversation (404) separately from a non-member caller (403).
"""

from dataclasses import dataclass

from roomchat.application.common.interfaces import Query, QueryHandler
from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.application.services.view_assembler import ConversationView, ViewAssembler
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetConversationQuery(Query[ConversationView]):
    conversation_id: ConversationId
    user_id: UserId


class GetConversationHandler(QueryHandler[ConversationView]):
    def __init__(
        self,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
    ):
        self._authorization = authorization
        self._view_assembler = view_assembler

    async def execute(self, query: GetConversationQuery) -> ConversationView:
        conversation = await self._authorization.get_conversation_for_user(
            query.conversation_id, query.user_id
        )
        return await self._view_assembler.conversation_view(conversation)
