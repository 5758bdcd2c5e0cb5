"""Message queries."""

from roomchat.application.queries.messages.list_messages import (
    ListMessagesQuery,
    ListMessagesHandler,
    MessagePage,
)
from roomchat.application.queries.messages.get_message import (
    GetMessageQuery,
    GetMessageHandler,
)

__all__ = [
    "ListMessagesQuery",
    "ListMessagesHandler",
    "MessagePage",
    "GetMessageQuery",
    "GetMessageHandler",
]
