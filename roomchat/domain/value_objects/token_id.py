"""
TokenId Value Object - identity of a persisted access token (the JWT `jti`).
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class TokenId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Token ID cannot be empty")
        UUID(self.value)

    @classmethod
    def generate(cls) -> "TokenId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
