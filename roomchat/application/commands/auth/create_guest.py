"""
Create Guest Command.

A guest is a throwaway account with a random address under guest.local and a
short-lived token carrying the `guest` ability.
"""

import logging
import secrets
import time
from dataclasses import dataclass

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.token_issuer import AccessTokenIssuer, IssuedToken
from roomchat.domain.entities.access_token import TokenType
from roomchat.domain.entities.user import User
from roomchat.domain.ports.password_hasher import PasswordHasher
from roomchat.domain.ports.repositories import UserRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.user_email import UserEmail

logger = logging.getLogger(__name__)

GUEST_EMAIL_DOMAIN = "guest.local"
GUEST_FULL_NAME = "Guest User"


@dataclass(frozen=True)
class CreateGuestCommand(Command[IssuedToken]):
    pass


class CreateGuestHandler(CommandHandler[IssuedToken]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: AccessTokenIssuer,
        uow: UnitOfWork,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer
        self._uow = uow

    async def execute(self, command: CreateGuestCommand) -> IssuedToken:
        email = UserEmail(
            f"guest_{int(time.time() * 1000)}_{secrets.token_hex(4)}@{GUEST_EMAIL_DOMAIN}"
        )
        guest = User.create(
            email=email,
            password_hash=self._password_hasher.hash(secrets.token_urlsafe(16)),
            full_name=GUEST_FULL_NAME,
        )
        await self._user_repository.add(guest)
        issued = await self._token_issuer.issue(guest.id, TokenType.GUEST)
        await self._uow.commit()

        logger.info(f"[auth] Created guest user {guest.id.value}")
        return issued
