"""
Dishka DI Container Setup.

- Registers all dependencies (engine, repositories, services, handlers)
- Maps abstract ports to concrete implementations
- Manages lifecycle: Scope.APP objects live as long as the app, Scope.REQUEST
  objects are built per HTTP request and share one AsyncSession

Flow:
  Container → provides → SqlAlchemyParticipantRepository → to → ConversationAuthorizationService
                                    ↓
                            uses ParticipantRepository interface
"""

from datetime import timedelta
from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from roomchat.application.commands.auth import (
    CreateGuestHandler,
    LoginHandler,
    LogoutHandler,
    RefreshTokenHandler,
    RegisterUserHandler,
)
from roomchat.application.commands.conversations import (
    AddParticipantHandler,
    CreateConversationHandler,
    DeleteConversationHandler,
    RemoveParticipantHandler,
    UpdateConversationHandler,
)
from roomchat.application.commands.messages import (
    CreateMessageHandler,
    DeleteMessageHandler,
    UpdateMessageHandler,
)
from roomchat.application.queries.auth import AuthenticateTokenHandler
from roomchat.application.queries.conversations import (
    GetConversationHandler,
    ListConversationsHandler,
)
from roomchat.application.queries.messages import GetMessageHandler, ListMessagesHandler
from roomchat.application.services import (
    AccessTokenIssuer,
    ConversationAuthorizationService,
    ViewAssembler,
)
from roomchat.config.settings import Config
from roomchat.domain.ports import PasswordHasher, TokenService, UnitOfWork
from roomchat.domain.ports.repositories import (
    AccessTokenRepository,
    ConversationRepository,
    MessageRepository,
    ParticipantRepository,
    UserRepository,
)
from roomchat.infrastructure.persistence import (
    SqlAlchemyAccessTokenRepository,
    SqlAlchemyConversationRepository,
    SqlAlchemyMessageRepository,
    SqlAlchemyParticipantRepository,
    SqlAlchemyUnitOfWork,
    SqlAlchemyUserRepository,
    create_engine,
    create_session_factory,
)
from roomchat.infrastructure.security import BcryptPasswordHasher, JwtTokenService


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations. Settings default to
    Config; tests pass their own database URL.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        database_echo: Optional[bool] = None,
        bcrypt_rounds: Optional[int] = None,
    ):
        super().__init__()
        self._database_url = database_url or Config.DATABASE_URL
        self._database_echo = (
            Config.DATABASE_ECHO if database_echo is None else database_echo
        )
        self._bcrypt_rounds = bcrypt_rounds or Config.BCRYPT_ROUNDS

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_engine(self) -> AsyncIterable[AsyncEngine]:
        """
        Provide the async engine (singleton, app-scoped).

        The pool is disposed when the container closes.
        """
        engine = create_engine(self._database_url, echo=self._database_echo)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        """One session per request; anything not committed is discarded on close."""
        async with session_factory() as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        return SqlAlchemyUnitOfWork(session)

    # ==================== SECURITY ====================

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return BcryptPasswordHasher(rounds=self._bcrypt_rounds)

    @provide(scope=Scope.APP)
    def get_token_service(self) -> TokenService:
        return JwtTokenService(
            secret=Config.AUTH_TOKEN_SECRET,
            issuer=Config.AUTH_TOKEN_ISSUER,
            audience=Config.AUTH_TOKEN_AUDIENCE,
        )

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """
        Provide UserRepository implementation.

        - Return type is ABSTRACT (UserRepository)
        - Implementation is CONCRETE (SqlAlchemyUserRepository)
        """
        return SqlAlchemyUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_access_token_repository(self, session: AsyncSession) -> AccessTokenRepository:
        return SqlAlchemyAccessTokenRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, session: AsyncSession) -> ConversationRepository:
        return SqlAlchemyConversationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_participant_repository(self, session: AsyncSession) -> ParticipantRepository:
        return SqlAlchemyParticipantRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, session: AsyncSession) -> MessageRepository:
        return SqlAlchemyMessageRepository(session)

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_conversation_authorization(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
    ) -> ConversationAuthorizationService:
        return ConversationAuthorizationService(
            conversation_repository=conversation_repository,
            participant_repository=participant_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_token_issuer(
        self, token_repository: AccessTokenRepository, token_service: TokenService
    ) -> AccessTokenIssuer:
        return AccessTokenIssuer(
            token_repository=token_repository,
            token_service=token_service,
            user_ttl=timedelta(seconds=Config.ACCESS_TOKEN_TTL_SECONDS),
            guest_ttl=timedelta(seconds=Config.GUEST_TOKEN_TTL_SECONDS),
        )

    @provide(scope=Scope.REQUEST)
    def get_view_assembler(
        self,
        user_repository: UserRepository,
        participant_repository: ParticipantRepository,
        message_repository: MessageRepository,
    ) -> ViewAssembler:
        return ViewAssembler(
            user_repository=user_repository,
            participant_repository=participant_repository,
            message_repository=message_repository,
        )

    # ==================== AUTH HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: AccessTokenIssuer,
        uow: UnitOfWork,
    ) -> RegisterUserHandler:
        return RegisterUserHandler(user_repository, password_hasher, token_issuer, uow)

    @provide(scope=Scope.REQUEST)
    def get_login_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: AccessTokenIssuer,
        uow: UnitOfWork,
    ) -> LoginHandler:
        return LoginHandler(user_repository, password_hasher, token_issuer, uow)

    @provide(scope=Scope.REQUEST)
    def get_refresh_token_handler(
        self,
        token_repository: AccessTokenRepository,
        token_issuer: AccessTokenIssuer,
        uow: UnitOfWork,
    ) -> RefreshTokenHandler:
        return RefreshTokenHandler(token_repository, token_issuer, uow)

    @provide(scope=Scope.REQUEST)
    def get_logout_handler(
        self, token_repository: AccessTokenRepository, uow: UnitOfWork
    ) -> LogoutHandler:
        return LogoutHandler(token_repository, uow)

    @provide(scope=Scope.REQUEST)
    def get_create_guest_handler(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: AccessTokenIssuer,
        uow: UnitOfWork,
    ) -> CreateGuestHandler:
        return CreateGuestHandler(user_repository, password_hasher, token_issuer, uow)

    @provide(scope=Scope.REQUEST)
    def get_authenticate_token_handler(
        self,
        token_service: TokenService,
        token_repository: AccessTokenRepository,
        user_repository: UserRepository,
    ) -> AuthenticateTokenHandler:
        return AuthenticateTokenHandler(token_service, token_repository, user_repository)

    # ==================== CONVERSATION HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self,
        conversation_repository: ConversationRepository,
        view_assembler: ViewAssembler,
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository, view_assembler)

    @provide(scope=Scope.REQUEST)
    def get_get_conversation_handler(
        self,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
    ) -> GetConversationHandler:
        return GetConversationHandler(authorization, view_assembler)

    @provide(scope=Scope.REQUEST)
    def get_create_conversation_handler(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
        user_repository: UserRepository,
        view_assembler: ViewAssembler,
        uow: UnitOfWork,
    ) -> CreateConversationHandler:
        return CreateConversationHandler(
            conversation_repository,
            participant_repository,
            user_repository,
            view_assembler,
            uow,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_conversation_handler(
        self,
        conversation_repository: ConversationRepository,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
        uow: UnitOfWork,
    ) -> UpdateConversationHandler:
        return UpdateConversationHandler(
            conversation_repository, authorization, view_assembler, uow
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_conversation_handler(
        self,
        conversation_repository: ConversationRepository,
        authorization: ConversationAuthorizationService,
        uow: UnitOfWork,
    ) -> DeleteConversationHandler:
        return DeleteConversationHandler(conversation_repository, authorization, uow)

    @provide(scope=Scope.REQUEST)
    def get_add_participant_handler(
        self,
        participant_repository: ParticipantRepository,
        user_repository: UserRepository,
        authorization: ConversationAuthorizationService,
        uow: UnitOfWork,
    ) -> AddParticipantHandler:
        return AddParticipantHandler(
            participant_repository, user_repository, authorization, uow
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_participant_handler(
        self,
        participant_repository: ParticipantRepository,
        authorization: ConversationAuthorizationService,
        uow: UnitOfWork,
    ) -> RemoveParticipantHandler:
        return RemoveParticipantHandler(participant_repository, authorization, uow)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self,
        message_repository: MessageRepository,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
    ) -> ListMessagesHandler:
        return ListMessagesHandler(message_repository, authorization, view_assembler)

    @provide(scope=Scope.REQUEST)
    def get_get_message_handler(
        self,
        message_repository: MessageRepository,
        conversation_repository: ConversationRepository,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
    ) -> GetMessageHandler:
        return GetMessageHandler(
            message_repository, conversation_repository, authorization, view_assembler
        )

    @provide(scope=Scope.REQUEST)
    def get_create_message_handler(
        self,
        message_repository: MessageRepository,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
        uow: UnitOfWork,
    ) -> CreateMessageHandler:
        return CreateMessageHandler(message_repository, authorization, view_assembler, uow)

    @provide(scope=Scope.REQUEST)
    def get_update_message_handler(
        self,
        message_repository: MessageRepository,
        authorization: ConversationAuthorizationService,
        view_assembler: ViewAssembler,
        uow: UnitOfWork,
    ) -> UpdateMessageHandler:
        return UpdateMessageHandler(message_repository, authorization, view_assembler, uow)

    @provide(scope=Scope.REQUEST)
    def get_delete_message_handler(
        self,
        message_repository: MessageRepository,
        authorization: ConversationAuthorizationService,
        uow: UnitOfWork,
    ) -> DeleteMessageHandler:
        return DeleteMessageHandler(message_repository, authorization, uow)


def create_container(database_url: Optional[str] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE per application instance.
    """
    return make_async_container(AppProvider(database_url=database_url))
