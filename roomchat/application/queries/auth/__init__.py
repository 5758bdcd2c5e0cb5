"""Identity queries."""

from roomchat.application.queries.auth.authenticate import (
    AuthenticatedUser,
    AuthenticateTokenQuery,
    AuthenticateTokenHandler,
)

__all__ = [
    "AuthenticatedUser",
    "AuthenticateTokenQuery",
    "AuthenticateTokenHandler",
]
