"""
DTOs - Data Transfer Objects

DTOs for transferring data out of the application layer:
- common.py → CamelModel, UserSummaryDTO
- conversation.py → ConversationDTO, ParticipantDTO
- message.py → MessageDTO, ReplySummaryDTO, MessagePageDTO
- auth.py → TokenDTO, AuthDTO, GuestTokenDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from roomchat.application.dto.common import CamelModel, UserSummaryDTO
from roomchat.application.dto.conversation import (
    ConversationDTO,
    ParticipantDTO,
)
from roomchat.application.dto.message import (
    ConversationRefDTO,
    MessageDTO,
    MessageDetailDTO,
    MessagePageDTO,
    PageMetaDTO,
    ReplySummaryDTO,
)
from roomchat.application.dto.auth import AuthDTO, GuestTokenDTO, TokenDTO

__all__ = [
    "CamelModel",
    "UserSummaryDTO",
    "ConversationDTO",
    "ParticipantDTO",
    "ConversationRefDTO",
    "MessageDTO",
    "MessageDetailDTO",
    "MessagePageDTO",
    "PageMetaDTO",
    "ReplySummaryDTO",
    "AuthDTO",
    "GuestTokenDTO",
    "TokenDTO",
]
