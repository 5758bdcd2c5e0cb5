"""Auth DTOs for API responses."""

from datetime import datetime

from roomchat.application.dto.common import CamelModel, UserSummaryDTO
from roomchat.application.commands.auth.register_user import AuthResult
from roomchat.application.services.token_issuer import IssuedToken


class TokenDTO(CamelModel):
    token: str


class AuthDTO(CamelModel):
    user: UserSummaryDTO
    token: str

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthDTO":
        return cls(
            user=UserSummaryDTO.from_entity(result.user),
            token=result.token.secret,
        )


class GuestTokenDTO(CamelModel):
    token: str
    expires_at: datetime

    @classmethod
    def from_issued(cls, issued: IssuedToken) -> "GuestTokenDTO":
        return cls(token=issued.secret, expires_at=issued.token.expires_at)
