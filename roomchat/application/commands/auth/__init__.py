"""Identity and token lifecycle commands."""

from .register_user import AuthResult, RegisterUserCommand, RegisterUserHandler
from .login import LoginCommand, LoginHandler
from .refresh_token import RefreshTokenCommand, RefreshTokenHandler
from .logout import LogoutCommand, LogoutHandler
from .create_guest import CreateGuestCommand, CreateGuestHandler

__all__ = [
    "AuthResult",
    "RegisterUserCommand",
    "RegisterUserHandler",
    "LoginCommand",
    "LoginHandler",
    "RefreshTokenCommand",
    "RefreshTokenHandler",
    "LogoutCommand",
    "LogoutHandler",
    "CreateGuestCommand",
    "CreateGuestHandler",
]
