"""Conversation-related queries."""

from roomchat.application.queries.conversations.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)
from roomchat.application.queries.conversations.get_conversation import (
    GetConversationQuery,
    GetConversationHandler,
)

__all__ = [
    "ListConversationsQuery",
    "ListConversationsHandler",
    "GetConversationQuery",
    "GetConversationHandler",
]
