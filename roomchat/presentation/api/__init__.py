"""API routers."""

from roomchat.presentation.api.auth import router as auth_router
from roomchat.presentation.api.conversations import router as conversations_router
from roomchat.presentation.api.messages import router as messages_router

__all__ = [
    "auth_router",
    "conversations_router",
    "messages_router",
]
