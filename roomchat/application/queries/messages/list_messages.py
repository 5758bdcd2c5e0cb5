"""
ListMessages Query - one page of a conversation's messages, newest first.

Each entry carries its author and, when it is a reply, a shallow preview of
the target.
"""

import math
from dataclasses import dataclass

from roomchat.application.common.interfaces import Query, QueryHandler
from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.application.services.view_assembler import MessageView, ViewAssembler
from roomchat.config.settings import Config
from roomchat.domain.exceptions import DomainValidationError
from roomchat.domain.ports.repositories import MessageRepository
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId


@dataclass
class MessagePage:
    """A page of messages plus what a client needs to paginate."""

    items: list[MessageView]
    total: int
    page: int
    per_page: int

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))


@dataclass(frozen=True)
class ListMessagesQuery(Query[MessagePage]):
    conversation_id: ConversationId
    user_id: UserId
    page: int = 1
    per_page: int = Config.MESSAGE_PAGE_SIZE

    def __post_init__(self):
        if self.page < 1:
            raise DomainValidationError("page must be >= 1", field="page")
        if self.per_page < 1:
            raise DomainValidationError("limit must be >= 1", field="limit")


class ListMessagesHandler(QueryHandler[MessagePage]):
    def __init__(
        self,
        message_repository: MessageRepository,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
    ):
        self._message_repository = message_repository
        self._authorization = authorization
        self._view_assembler = view_assembler

    async def execute(self, query: ListMessagesQuery) -> MessagePage:
        await self._authorization.ensure_participant(
            query.conversation_id, query.user_id
        )

        messages, total = await self._message_repository.get_page(
            query.conversation_id, query.page, query.per_page
        )
        return MessagePage(
            items=await self._view_assembler.message_views(messages),
            total=total,
            page=query.page,
            per_page=query.per_page,
        )
