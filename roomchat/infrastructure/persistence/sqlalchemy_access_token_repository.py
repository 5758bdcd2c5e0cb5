"""
SQLAlchemy Access Token Repository Implementation.
"""

from typing import Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from roomchat.domain.entities.access_token import AccessToken, TokenType
from roomchat.domain.ports.repositories import AccessTokenRepository
from roomchat.domain.value_objects.token_id import TokenId
from roomchat.domain.value_objects.user_id import UserId
from roomchat.infrastructure.persistence.database import as_utc
from roomchat.infrastructure.persistence.models import AccessTokenModel


class SqlAlchemyAccessTokenRepository(AccessTokenRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, record: AccessTokenModel) -> AccessToken:
        return AccessToken(
            id=TokenId(record.id),
            user_id=UserId(record.user_id),
            type=TokenType(record.type),
            expires_at=as_utc(record.expires_at),
            created_at=as_utc(record.created_at),
            abilities=list(record.abilities or []),
            token_hash=record.token_hash,
        )

    async def get_by_id(self, token_id: TokenId) -> Optional[AccessToken]:
        record = await self._session.get(AccessTokenModel, token_id.value)
        return self._to_entity(record) if record else None

    async def add(self, token: AccessToken) -> None:
        if not token.token_hash:
            raise ValueError("Access token must be bound to a secret before saving")

        self._session.add(
            AccessTokenModel(
                id=token.id.value,
                user_id=token.user_id.value,
                type=token.type.value,
                abilities=list(token.abilities),
                token_hash=token.token_hash,
                expires_at=token.expires_at,
                created_at=token.created_at,
            )
        )
        await self._session.flush()

    async def delete(self, token_id: TokenId) -> bool:
        result = await self._session.execute(
            delete(AccessTokenModel).where(AccessTokenModel.id == token_id.value)
        )
        return result.rowcount > 0
