"""Message DTOs for API responses."""

from datetime import datetime
from typing import Optional

from roomchat.application.dto.common import CamelModel, UserSummaryDTO
from roomchat.application.queries.messages.list_messages import MessagePage
from roomchat.application.services.view_assembler import MessageView, ReplyView
from roomchat.domain.entities.conversation import Conversation


class ReplySummaryDTO(CamelModel):
    """Shallow preview of a reply target; never carries its own reply target."""

    id: str
    content: str
    user_id: str
    user: Optional[UserSummaryDTO] = None

    @classmethod
    def from_view(cls, view: ReplyView) -> "ReplySummaryDTO":
        return cls(
            id=view.message.id.value,
            content=view.message.content,
            user_id=view.message.user_id.value,
            user=UserSummaryDTO.from_entity(view.author),
        )


class ConversationRefDTO(CamelModel):
    id: str
    name: Optional[str] = None

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationRefDTO":
        return cls(id=conversation.id.value, name=conversation.name)


class MessageDTO(CamelModel):
    id: str
    conversation_id: str
    user_id: str
    content: str
    reply_to_id: Optional[str] = None
    edited_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    user: Optional[UserSummaryDTO] = None
    reply_to: Optional[ReplySummaryDTO] = None

    @classmethod
    def from_view(cls, view: MessageView) -> "MessageDTO":
        message = view.message
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            user_id=message.user_id.value,
            content=message.content,
            reply_to_id=message.reply_to_id.value if message.reply_to_id else None,
            edited_at=message.edited_at,
            created_at=message.created_at,
            updated_at=message.updated_at,
            user=UserSummaryDTO.from_entity(view.author),
            reply_to=ReplySummaryDTO.from_view(view.reply_to) if view.reply_to else None,
        )


class MessageDetailDTO(MessageDTO):
    conversation: Optional[ConversationRefDTO] = None

    @classmethod
    def from_view(cls, view: MessageView) -> "MessageDetailDTO":
        dto = super().from_view(view)
        if view.conversation is not None:
            dto.conversation = ConversationRefDTO.from_entity(view.conversation)
        return dto


class PageMetaDTO(CamelModel):
    total: int
    per_page: int
    current_page: int
    last_page: int
    first_page: int = 1


class MessagePageDTO(CamelModel):
    meta: PageMetaDTO
    data: list[MessageDTO]

    @classmethod
    def from_page(cls, page: MessagePage) -> "MessagePageDTO":
        return cls(
            meta=PageMetaDTO(
                total=page.total,
                per_page=page.per_page,
                current_page=page.page,
                last_page=page.last_page,
            ),
            data=[MessageDTO.from_view(view) for view in page.items],
        )
