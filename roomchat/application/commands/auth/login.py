"""Login Command - verify credentials and issue a fresh token."""

import logging
from dataclasses import dataclass

from roomchat.application.commands.auth.register_user import AuthResult
from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.token_issuer import AccessTokenIssuer
from roomchat.domain.exceptions import InvalidCredentialsError
from roomchat.domain.ports.password_hasher import PasswordHasher
from roomchat.domain.ports.repositories import UserRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.user_email import UserEmail

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginCommand(Command[AuthResult]):
    email: str
    password: str


class LoginHandler(CommandHandler[AuthResult]):
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

    async def execute(self, command: LoginCommand) -> AuthResult:
        user = await self._user_repository.get_by_email(
            UserEmail.normalized(command.email)
        )
        # Same error for unknown email and wrong password
        if user is None or not self._password_hasher.verify(
            command.password, user.password_hash
        ):
            logger.warning("[auth] Failed login attempt")
            raise InvalidCredentialsError()

        issued = await self._token_issuer.issue(user.id)
        await self._uow.commit()
        return AuthResult(user=user, token=issued)
