"""
AccessToken Entity - A bearer credential issued to a user.

The plaintext secret is handed to the client once; only its SHA-256 digest
is kept. Deleting the token revokes it.
"""

from __future__ import annotations
import hashlib
import hmac
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional
from roomchat.domain.value_objects.token_id import TokenId
from roomchat.domain.value_objects.user_id import UserId


class TokenType(str, Enum):
    USER = "user"
    GUEST = "guest"


@dataclass
class AccessToken:
    id: TokenId
    user_id: UserId
    type: TokenType
    expires_at: datetime
    created_at: datetime
    abilities: list[str] = field(default_factory=lambda: ["*"])
    token_hash: Optional[str] = None

    @classmethod
    def create(
        cls,
        user_id: UserId,
        type: TokenType,
        ttl: timedelta,
        abilities: Optional[list[str]] = None,
    ) -> AccessToken:
        now = datetime.now(timezone.utc)
        return cls(
            id=TokenId.generate(),
            user_id=user_id,
            type=type,
            expires_at=now + ttl,
            created_at=now,
            abilities=list(abilities) if abilities else ["*"],
        )

    @staticmethod
    def digest(secret: str) -> str:
        return hashlib.sha256(secret.encode("utf-8")).hexdigest()

    def bind_secret(self, secret: str) -> None:
        self.token_hash = self.digest(secret)

    def matches(self, secret: str) -> bool:
        if not self.token_hash:
            return False
        return hmac.compare_digest(self.token_hash, self.digest(secret))

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at
