"""Logout Command - revoke the presented token."""

import logging
from dataclasses import dataclass

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.domain.ports.repositories import AccessTokenRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.token_id import TokenId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogoutCommand(Command[None]):
    token_id: TokenId


class LogoutHandler(CommandHandler[None]):
    def __init__(self, token_repository: AccessTokenRepository, uow: UnitOfWork):
        self._token_repository = token_repository
        self._uow = uow

    async def execute(self, command: LogoutCommand) -> None:
        await self._token_repository.delete(command.token_id)
        await self._uow.commit()
        logger.info(f"[auth] Revoked token {command.token_id.value}")
