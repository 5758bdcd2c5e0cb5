"""
User Repository Port - Interface for user persistence.
Implementation: roomchat/infrastructure/persistence/sqlalchemy_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional
from roomchat.domain.entities.user import User
from roomchat.domain.value_objects.user_email import UserEmail
from roomchat.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_email(self, email: UserEmail) -> Optional[User]: ...

    @abstractmethod
    async def get_many(self, user_ids: Iterable[UserId]) -> dict[UserId, User]: ...

    @abstractmethod
    async def add(self, user: User) -> None:
        """Stage a new user. Raises DomainValidationError if the email is taken."""
        ...
