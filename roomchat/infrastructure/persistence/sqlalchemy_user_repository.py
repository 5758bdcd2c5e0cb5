"""
SQLAlchemy User Repository Implementation.

- Implements UserRepository port from domain layer
- Maps between UserModel rows and User entities
- Email uniqueness is enforced by the users.email unique index
"""

from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from roomchat.domain.entities.user import User
from roomchat.domain.exceptions import DomainValidationError
from roomchat.domain.ports.repositories import UserRepository
from roomchat.domain.value_objects.user_email import UserEmail
from roomchat.domain.value_objects.user_id import UserId
from roomchat.infrastructure.persistence.database import as_utc
from roomchat.infrastructure.persistence.models import UserModel


class SqlAlchemyUserRepository(UserRepository):
    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, record: UserModel) -> User:
        """Map ORM row to domain entity."""
        return User(
            id=UserId(record.id),
            email=UserEmail(record.email),
            password_hash=record.password_hash,
            created_at=as_utc(record.created_at),
            full_name=record.full_name,
            updated_at=as_utc(record.updated_at),
        )

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._session.get(UserModel, user_id.value)
        return self._to_entity(record) if record else None

    async def get_by_email(self, email: UserEmail) -> Optional[User]:
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == email.value)
        )
        record = result.scalars().first()
        return self._to_entity(record) if record else None

    async def get_many(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        ids = {user_id.value for user_id in user_ids}
        if not ids:
            return {}
        result = await self._session.execute(
            select(UserModel).where(UserModel.id.in_(ids))
        )
        users = [self._to_entity(record) for record in result.scalars().all()]
        return {user.id: user for user in users}

    async def add(self, user: User) -> None:
        self._session.add(
            UserModel(
                id=user.id.value,
                email=user.email.value,
                password_hash=user.password_hash,
                full_name=user.full_name,
                created_at=user.created_at,
                updated_at=user.updated_at,
            )
        )
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise DomainValidationError(
                "The email has already been taken", field="email"
            ) from e
