"""Conversation DTOs for API responses."""

from datetime import datetime
from typing import Optional

from roomchat.application.dto.common import CamelModel, UserSummaryDTO
from roomchat.application.services.view_assembler import (
    ConversationView,
    ParticipantView,
)


class ParticipantDTO(CamelModel):
    id: str
    conversation_id: str
    user_id: str
    joined_at: datetime
    user: Optional[UserSummaryDTO] = None

    @classmethod
    def from_view(cls, view: ParticipantView) -> "ParticipantDTO":
        participant = view.participant
        return cls(
            id=participant.id,
            conversation_id=participant.conversation_id.value,
            user_id=participant.user_id.value,
            joined_at=participant.joined_at,
            user=UserSummaryDTO.from_entity(view.user),
        )


class ConversationDTO(CamelModel):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    created_by: str
    created_at: datetime
    updated_at: datetime
    creator: Optional[UserSummaryDTO] = None
    participants: list[ParticipantDTO] = []

    @classmethod
    def from_view(cls, view: ConversationView) -> "ConversationDTO":
        conversation = view.conversation
        return cls(
            id=conversation.id.value,
            name=conversation.name,
            description=conversation.description,
            created_by=conversation.created_by.value,
            created_at=conversation.created_at,
            updated_at=conversation.updated_at,
            creator=UserSummaryDTO.from_entity(view.creator),
            participants=[ParticipantDTO.from_view(p) for p in view.participants],
        )
