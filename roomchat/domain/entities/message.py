"""
Message Entity - A single message in a conversation.

A message may reference another message of the same conversation through
`reply_to_id`. The reference is a plain id, resolved by lookup, never an
embedded object.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from roomchat.domain.exceptions.validation_error import DomainValidationError
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId


def _clean_content(content: str) -> str:
    cleaned = (content or "").strip()
    if not cleaned:
        raise DomainValidationError("Message content cannot be empty", field="content")
    return cleaned


@dataclass
class Message:
    id: MessageId
    conversation_id: ConversationId
    user_id: UserId
    content: str
    created_at: datetime
    updated_at: datetime
    reply_to_id: Optional[MessageId] = None
    edited_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        user_id: UserId,
        content: str,
        reply_to_id: Optional[MessageId] = None,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        now = datetime.now(timezone.utc)
        return cls(
            id=MessageId.generate(),
            conversation_id=conversation_id,
            user_id=user_id,
            content=_clean_content(content),
            created_at=now,
            updated_at=now,
            reply_to_id=reply_to_id,
        )

    @property
    def is_edited(self) -> bool:
        return self.edited_at is not None

    def is_authored_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    def edit(self, content: str) -> None:
        self.content = _clean_content(content)
        now = datetime.now(timezone.utc)
        self.edited_at = now
        self.updated_at = now
