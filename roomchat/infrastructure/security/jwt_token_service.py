"""
JWT Token Service.

- Encodes an AccessToken as an HS256 JWT; `jti` carries the token row id
- Decodes and validates signature, issuer, audience and expiry
- Revocation is handled by the caller: a decoded `jti` whose row is gone is dead
"""

import logging
from datetime import timezone

import jwt

from roomchat.domain.entities.access_token import AccessToken
from roomchat.domain.exceptions import InvalidTokenError
from roomchat.domain.ports.token_service import TokenService
from roomchat.domain.value_objects.token_id import TokenId

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class JwtTokenService(TokenService):
    def __init__(self, secret: str, issuer: str, audience: str):
        if not secret:
            raise ValueError("JWT secret must be configured")
        self._secret = secret
        self._issuer = issuer
        self._audience = audience

    def encode(self, token: AccessToken) -> str:
        payload = {
            "sub": token.user_id.value,
            "jti": token.id.value,
            "type": token.type.value,
            "abilities": list(token.abilities),
            "iat": token.created_at.astimezone(timezone.utc),
            "exp": token.expires_at.astimezone(timezone.utc),
            "iss": self._issuer,
            "aud": self._audience,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, secret: str) -> TokenId:
        try:
            claims = jwt.decode(
                secret,
                self._secret,
                algorithms=[ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "aud", "iss", "jti", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning(f"[jwt] Rejected token: {e}")
            raise InvalidTokenError() from e

        try:
            return TokenId(claims["jti"])
        except ValueError as e:
            raise InvalidTokenError("Invalid token claims") from e
