"""
Participant Entity - Membership of one user in one conversation.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId


@dataclass
class Participant:
    id: str
    conversation_id: ConversationId
    user_id: UserId
    joined_at: datetime

    @classmethod
    def join(cls, conversation_id: ConversationId, user_id: UserId) -> Participant:
        return cls(
            id=str(uuid4()),
            conversation_id=conversation_id,
            user_id=user_id,
            joined_at=datetime.now(timezone.utc),
        )
