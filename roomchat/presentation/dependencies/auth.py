"""
Authentication Dependency for FastAPI.

- Extracts the bearer token from the Authorization header
- Resolves it to a user through AuthenticateTokenHandler (signature, claims,
  stored digest, expiry, revocation)
- A missing header raises InvalidTokenError, which the app maps to 401
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from roomchat.application.queries.auth import (
    AuthenticatedUser,
    AuthenticateTokenHandler,
    AuthenticateTokenQuery,
)
from roomchat.domain.exceptions import InvalidTokenError

# Missing credentials must surface as our 401 body, not HTTPBearer's 403
security = HTTPBearer(auto_error=False)

AuthUser = AuthenticatedUser


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Resolve the caller from the bearer token.

    Raises:
        InvalidTokenError if the token is missing, malformed, expired or revoked
    """
    if credentials is None or not credentials.credentials:
        raise InvalidTokenError("Unauthorized access")

    # Same request-scoped container the route's FromDishka dependencies use
    handler = await request.state.dishka_container.get(AuthenticateTokenHandler)
    return await handler.execute(AuthenticateTokenQuery(secret=credentials.credentials))
