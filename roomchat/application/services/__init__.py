"""Application services shared by several handlers."""

from roomchat.application.services.conversation_authorization import (
    ConversationAuthorizationService,
)
from roomchat.application.services.token_issuer import AccessTokenIssuer, IssuedToken
from roomchat.application.services.view_assembler import (
    ConversationView,
    MessageView,
    ParticipantView,
    ReplyView,
    ViewAssembler,
)

__all__ = [
    "ConversationAuthorizationService",
    "AccessTokenIssuer",
    "IssuedToken",
    "ConversationView",
    "MessageView",
    "ParticipantView",
    "ReplyView",
    "ViewAssembler",
]
