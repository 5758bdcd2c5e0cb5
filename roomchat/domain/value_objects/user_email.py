"""
UserEmail Value Object - Wraps user email with validation.

Emails are stored lower-cased so lookups are case-insensitive.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserEmail:
    value: str  # user_email, presented as email

    def __post_init__(self):
        if not self.value or "@" not in self.value:
            raise ValueError(f"Invalid user email: {self.value}")

    @classmethod
    def normalized(cls, raw: str) -> "UserEmail":
        return cls(raw.strip().lower())

    def __str__(self) -> str:
        return self.value
