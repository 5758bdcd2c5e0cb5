"""Security adapters - password hashing and bearer tokens."""

from roomchat.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from roomchat.infrastructure.security.jwt_token_service import JwtTokenService

__all__ = [
    "BcryptPasswordHasher",
    "JwtTokenService",
]
