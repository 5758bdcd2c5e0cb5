"""Register User Command."""

import logging
from dataclasses import dataclass
from typing import Optional

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.token_issuer import AccessTokenIssuer, IssuedToken
from roomchat.domain.entities.user import User
from roomchat.domain.exceptions import DomainValidationError
from roomchat.domain.ports.password_hasher import PasswordHasher
from roomchat.domain.ports.repositories import UserRepository
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.user_email import UserEmail

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    user: User
    token: IssuedToken


@dataclass(frozen=True)
class RegisterUserCommand(Command[AuthResult]):
    email: str
    password: str
    full_name: Optional[str] = None


class RegisterUserHandler(CommandHandler[AuthResult]):
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

    async def execute(self, command: RegisterUserCommand) -> AuthResult:
        email = UserEmail.normalized(command.email)
        if await self._user_repository.get_by_email(email):
            raise DomainValidationError("The email has already been taken", field="email")

        user = User.create(
            email=email,
            password_hash=self._password_hasher.hash(command.password),
            full_name=command.full_name,
        )
        # Raises DomainValidationError if a concurrent registration won the race
        await self._user_repository.add(user)
        issued = await self._token_issuer.issue(user.id)
        await self._uow.commit()

        logger.info(f"[auth] Registered user {user.id.value}")
        return AuthResult(user=user, token=issued)
