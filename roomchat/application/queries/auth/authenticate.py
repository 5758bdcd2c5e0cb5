"""
AuthenticateToken Query - resolve a bearer secret to its user.

Steps:
1. Validate signature and claims (TokenService)
2. Load the token row named by `jti`; a missing row means revoked
3. Compare the stored digest with the presented secret
4. Reject expired tokens
5. Load the owning user
"""

from dataclasses import dataclass

from roomchat.application.common.interfaces import Query, QueryHandler
from roomchat.domain.entities.access_token import AccessToken
from roomchat.domain.entities.user import User
from roomchat.domain.exceptions import InvalidTokenError
from roomchat.domain.ports.repositories import AccessTokenRepository, UserRepository
from roomchat.domain.ports.token_service import TokenService


@dataclass(frozen=True)
class AuthenticatedUser:
    user: User
    token: AccessToken


@dataclass(frozen=True)
class AuthenticateTokenQuery(Query[AuthenticatedUser]):
    secret: str


class AuthenticateTokenHandler(QueryHandler[AuthenticatedUser]):
    def __init__(
        self,
        token_service: TokenService,
        token_repository: AccessTokenRepository,
        user_repository: UserRepository,
    ):
        self._token_service = token_service
        self._token_repository = token_repository
        self._user_repository = user_repository

    async def execute(self, query: AuthenticateTokenQuery) -> AuthenticatedUser:
        token_id = self._token_service.decode(query.secret)

        token = await self._token_repository.get_by_id(token_id)
        if token is None or not token.matches(query.secret):
            raise InvalidTokenError()
        if token.is_expired():
            raise InvalidTokenError("Token has expired")

        user = await self._user_repository.get_by_id(token.user_id)
        if user is None:
            raise InvalidTokenError()

        return AuthenticatedUser(user=user, token=token)
