"""Shared DTO base and the user summary embedded in most responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from roomchat.domain.entities.user import User


class CamelModel(BaseModel):
    """Serializes with camelCase keys; accepts snake_case or camelCase on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserSummaryDTO(CamelModel):
    id: str
    email: str
    full_name: Optional[str] = None

    @classmethod
    def from_entity(cls, user: Optional[User]) -> Optional["UserSummaryDTO"]:
        if user is None:
            return None
        return cls(id=user.id.value, email=str(user.email), full_name=user.full_name)
