"""
Refresh Token Command.

Issues a new token of the same type and abilities as the presented one, then
revokes the presented one. A guest stays a guest.
"""

import logging
from dataclasses import dataclass

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.token_issuer import AccessTokenIssuer, IssuedToken
from roomchat.domain.entities.access_token import AccessToken
from roomchat.domain.ports.repositories import AccessTokenRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefreshTokenCommand(Command[IssuedToken]):
    current_token: AccessToken


class RefreshTokenHandler(CommandHandler[IssuedToken]):
    def __init__(
        self,
        token_repository: AccessTokenRepository,
        token_issuer: AccessTokenIssuer,
        uow: UnitOfWork,
    ):
        self._token_repository = token_repository
        self._token_issuer = token_issuer
        self._uow = uow

    async def execute(self, command: RefreshTokenCommand) -> IssuedToken:
        current = command.current_token
        issued = await self._token_issuer.issue(
            current.user_id, current.type, abilities=current.abilities
        )
        await self._token_repository.delete(current.id)
        await self._uow.commit()

        logger.info(f"[auth] Rotated token {current.id.value} -> {issued.token.id.value}")
        return issued
