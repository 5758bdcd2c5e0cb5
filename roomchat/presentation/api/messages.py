"""
Messages API Router - single-message read, edit and delete.

Creation and listing live under /conversations/{id}/messages.
"""

from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Response, status
from pydantic import field_validator

from roomchat.application.commands.messages import (
    DeleteMessageCommand,
    DeleteMessageHandler,
    UpdateMessageCommand,
    UpdateMessageHandler,
)
from roomchat.application.dto import CamelModel, MessageDetailDTO, MessageDTO
from roomchat.application.queries.messages import GetMessageHandler, GetMessageQuery
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.presentation.dependencies.auth import AuthUser, get_current_user


class UpdateMessageRequest(CamelModel):
    content: str

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Message content cannot be empty")
        return value


router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("/{message_id}", response_model=MessageDetailDTO, status_code=status.HTTP_200_OK)
@inject
async def get_message(
    message_id: UUID,
    handler: FromDishka[GetMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    view = await handler.execute(
        GetMessageQuery(message_id=MessageId(str(message_id)), user_id=current_user.user.id)
    )
    return MessageDetailDTO.from_view(view)


@router.put("/{message_id}", response_model=MessageDTO, status_code=status.HTTP_200_OK)
@inject
async def update_message(
    message_id: UUID,
    request: UpdateMessageRequest,
    handler: FromDishka[UpdateMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Author only; marks the message as edited."""
    view = await handler.execute(
        UpdateMessageCommand(
            message_id=MessageId(str(message_id)),
            user_id=current_user.user.id,
            content=request.content,
        )
    )
    return MessageDTO.from_view(view)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_message(
    message_id: UUID,
    handler: FromDishka[DeleteMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(
        DeleteMessageCommand(message_id=MessageId(str(message_id)), user_id=current_user.user.id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
