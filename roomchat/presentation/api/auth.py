"""
Auth API Router - registration, login and token lifecycle.

Routes:
- POST /auth/register  201 {user, token}
- POST /auth/login     200 {user, token}
- POST /auth/refresh   200 {token}   (presented token is revoked)
- POST /auth/logout    204
- POST /auth/guest     201 {token, expiresAt}
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Response, status
from pydantic import EmailStr, Field

from roomchat.application.commands.auth import (
    CreateGuestCommand,
    CreateGuestHandler,
    LoginCommand,
    LoginHandler,
    LogoutCommand,
    LogoutHandler,
    RefreshTokenCommand,
    RefreshTokenHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from roomchat.application.dto import AuthDTO, CamelModel, GuestTokenDTO, TokenDTO
from roomchat.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================


class RegisterRequest(CamelModel):
    email: EmailStr
    # bcrypt ignores anything past 72 bytes
    password: str = Field(min_length=8, max_length=72)
    full_name: Optional[str] = Field(default=None, max_length=255)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


# ==================== ROUTER ====================

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthDTO, status_code=status.HTTP_201_CREATED)
@inject
async def register(request: RegisterRequest, handler: FromDishka[RegisterUserHandler]):
    result = await handler.execute(
        RegisterUserCommand(
            email=request.email,
            password=request.password,
            full_name=request.full_name,
        )
    )
    return AuthDTO.from_result(result)


@router.post("/login", response_model=AuthDTO, status_code=status.HTTP_200_OK)
@inject
async def login(request: LoginRequest, handler: FromDishka[LoginHandler]):
    result = await handler.execute(
        LoginCommand(email=request.email, password=request.password)
    )
    return AuthDTO.from_result(result)


@router.post("/refresh", response_model=TokenDTO, status_code=status.HTTP_200_OK)
@inject
async def refresh(
    handler: FromDishka[RefreshTokenHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Issue a replacement of the same type and revoke the presented token."""
    issued = await handler.execute(RefreshTokenCommand(current_token=current_user.token))
    return TokenDTO(token=issued.secret)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def logout(
    handler: FromDishka[LogoutHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await handler.execute(LogoutCommand(token_id=current_user.token.id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/guest", response_model=GuestTokenDTO, status_code=status.HTTP_201_CREATED)
@inject
async def guest(handler: FromDishka[CreateGuestHandler]):
    issued = await handler.execute(CreateGuestCommand())
    return GuestTokenDTO.from_issued(issued)
