"""
Conversations API Router - conversations, their rosters and their messages.

Thin layer: builds a command/query, runs the handler, converts the result to
a DTO. Domain errors propagate to the app-level exception handlers.

Flow:
  HTTP Request → Router → Command → Handler → Authorization → Repository
                                 ↓
  HTTP Response ← Router ← DTO ← View
"""

from logging import getLogger
from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import Field, field_validator

from roomchat.application.commands.conversations import (
    AddParticipantCommand,
    AddParticipantHandler,
    CreateConversationCommand,
    CreateConversationHandler,
    DeleteConversationCommand,
    DeleteConversationHandler,
    RemoveParticipantCommand,
    RemoveParticipantHandler,
    UpdateConversationCommand,
    UpdateConversationHandler,
)
from roomchat.application.commands.messages import (
    CreateMessageCommand,
    CreateMessageHandler,
)
from roomchat.application.dto import (
    CamelModel,
    ConversationDTO,
    MessageDTO,
    MessagePageDTO,
)
from roomchat.application.queries.conversations import (
    GetConversationHandler,
    GetConversationQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from roomchat.application.queries.messages import (
    ListMessagesHandler,
    ListMessagesQuery,
)
from roomchat.config.settings import Config
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.user_id import UserId
from roomchat.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateConversationRequest(CamelModel):
    name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    participant_ids: list[UUID] = Field(min_length=1)


class UpdateConversationRequest(CamelModel):
    """Only the fields present in the body are changed."""

    name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None


class AddParticipantRequest(CamelModel):
    user_id: UUID


class CreateMessageRequest(CamelModel):
    content: str
    reply_to_id: Optional[UUID] = None

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Message content cannot be empty")
        return value


class StatusMessageResponse(CamelModel):
    message: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["conversations"])


# ==================== CONVERSATIONS ====================


@router.get("", response_model=list[ConversationDTO], status_code=status.HTTP_200_OK)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List every conversation the caller participates in, newest first."""
    views = await handler.execute(ListConversationsQuery(user_id=current_user.user.id))
    return [ConversationDTO.from_view(view) for view in views]


@router.post("", response_model=ConversationDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_conversation(
    request: CreateConversationRequest,
    handler: FromDishka[CreateConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = CreateConversationCommand(
        creator_id=current_user.user.id,
        participant_ids=tuple(UserId(str(pid)) for pid in request.participant_ids),
        name=request.name,
        description=request.description,
    )
    view = await handler.execute(command)
    return ConversationDTO.from_view(view)


@router.get(
    "/{conversation_id}", response_model=ConversationDTO, status_code=status.HTTP_200_OK
)
@inject
async def get_conversation(
    conversation_id: UUID,
    handler: FromDishka[GetConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """404 when the conversation does not exist, 403 when the caller is not in it."""
    view = await handler.execute(
        GetConversationQuery(
            conversation_id=ConversationId(str(conversation_id)),
            user_id=current_user.user.id,
        )
    )
    return ConversationDTO.from_view(view)


@router.put(
    "/{conversation_id}", response_model=ConversationDTO, status_code=status.HTTP_200_OK
)
@inject
async def update_conversation(
    conversation_id: UUID,
    request: UpdateConversationRequest,
    handler: FromDishka[UpdateConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    view = await handler.execute(
        UpdateConversationCommand(
            conversation_id=ConversationId(str(conversation_id)),
            user_id=current_user.user.id,
            changes=request.model_dump(exclude_unset=True),
        )
    )
    return ConversationDTO.from_view(view)


@router.delete("/{conversation_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_conversation(
    conversation_id: UUID,
    handler: FromDishka[DeleteConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(
        DeleteConversationCommand(
            conversation_id=ConversationId(str(conversation_id)),
            user_id=current_user.user.id,
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==================== PARTICIPANTS ====================


@router.post(
    "/{conversation_id}/participants",
    response_model=StatusMessageResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def add_participant(
    conversation_id: UUID,
    request: AddParticipantRequest,
    handler: FromDishka[AddParticipantHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(
        AddParticipantCommand(
            conversation_id=ConversationId(str(conversation_id)),
            user_id=current_user.user.id,
            target_user_id=UserId(str(request.user_id)),
        )
    )
    return StatusMessageResponse(message="Participant added successfully")


@router.delete(
    "/{conversation_id}/participants/{user_id}",
    response_model=StatusMessageResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def remove_participant(
    conversation_id: UUID,
    user_id: UUID,
    handler: FromDishka[RemoveParticipantHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(
        RemoveParticipantCommand(
            conversation_id=ConversationId(str(conversation_id)),
            user_id=current_user.user.id,
            target_user_id=UserId(str(user_id)),
        )
    )
    return StatusMessageResponse(message="Participant removed successfully")


# ==================== MESSAGES ====================


@router.get(
    "/{conversation_id}/messages",
    response_model=MessagePageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    conversation_id: UUID,
    handler: FromDishka[ListMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
    page: int = Query(1, ge=1),
    limit: int = Query(Config.MESSAGE_PAGE_SIZE, ge=1, le=Config.MESSAGE_PAGE_SIZE_MAX),
):
    """Newest first; each entry carries its author and a shallow reply preview."""
    result = await handler.execute(
        ListMessagesQuery(
            conversation_id=ConversationId(str(conversation_id)),
            user_id=current_user.user.id,
            page=page,
            per_page=limit,
        )
    )
    return MessagePageDTO.from_page(result)


@router.post(
    "/{conversation_id}/messages",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_message(
    conversation_id: UUID,
    request: CreateMessageRequest,
    handler: FromDishka[CreateMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    view = await handler.execute(
        CreateMessageCommand(
            conversation_id=ConversationId(str(conversation_id)),
            user_id=current_user.user.id,
            content=request.content,
            reply_to_id=MessageId(str(request.reply_to_id)) if request.reply_to_id else None,
        )
    )
    return MessageDTO.from_view(view)
