"""
User Entity - A registered or guest account.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from roomchat.domain.value_objects.user_id import UserId
from roomchat.domain.value_objects.user_email import UserEmail


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    email: UserEmail
    password_hash: str
    created_at: datetime
    # Optional fields (with defaults) - must come last
    full_name: Optional[str] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls, email: UserEmail, password_hash: str, full_name: Optional[str] = None
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=UserId.generate(),
            email=email,
            password_hash=password_hash,
            created_at=now,
            full_name=full_name,
            updated_at=now,
        )
