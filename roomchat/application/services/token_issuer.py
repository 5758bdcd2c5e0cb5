"""
Access Token Issuer - creates, persists and hands out bearer tokens.

The secret is returned exactly once, inside IssuedToken; the stored row only
keeps its digest.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from roomchat.domain.entities.access_token import AccessToken, TokenType
from roomchat.domain.ports.repositories import AccessTokenRepository
from roomchat.domain.ports.token_service import TokenService
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

GUEST_ABILITIES = ["guest"]


@dataclass(frozen=True)
class IssuedToken:
    token: AccessToken
    secret: str


class AccessTokenIssuer:
    def __init__(
        self,
        token_repository: AccessTokenRepository,
        token_service: TokenService,
        user_ttl: timedelta,
        guest_ttl: timedelta,
    ):
        self._token_repository = token_repository
        self._token_service = token_service
        self._ttls = {TokenType.USER: user_ttl, TokenType.GUEST: guest_ttl}

    async def issue(
        self,
        user_id: UserId,
        token_type: TokenType = TokenType.USER,
        abilities: Optional[list[str]] = None,
    ) -> IssuedToken:
        if abilities is None and token_type is TokenType.GUEST:
            abilities = GUEST_ABILITIES

        token = AccessToken.create(
            user_id=user_id,
            type=token_type,
            ttl=self._ttls[token_type],
            abilities=abilities,
        )
        secret = self._token_service.encode(token)
        token.bind_secret(secret)
        await self._token_repository.add(token)

        logger.info(
            f"[tokens] Issued {token_type.value} token {token.id.value} for user {user_id.value}"
        )
        return IssuedToken(token=token, secret=secret)
