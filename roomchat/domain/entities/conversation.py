"""
Conversation Entity - A multi-user chat room.

The creator is fixed at creation; only name and description change later.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional

from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId

EDITABLE_FIELDS = ("name", "description")


@dataclass
class Conversation:
    id: ConversationId
    created_by: UserId
    created_at: datetime
    updated_at: datetime
    name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def create(
        cls,
        created_by: UserId,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Conversation:
        now = datetime.now(timezone.utc)
        return cls(
            id=ConversationId.generate(),
            created_by=created_by,
            created_at=now,
            updated_at=now,
            name=name,
            description=description,
        )

    def is_created_by(self, user_id: UserId) -> bool:
        return self.created_by == user_id

    def update_details(self, changes: Mapping[str, Optional[str]]) -> None:
        """Merge only the provided fields; keys outside name/description are rejected."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        for key, value in changes.items():
            setattr(self, key, value)
        self.updated_at = datetime.now(timezone.utc)
