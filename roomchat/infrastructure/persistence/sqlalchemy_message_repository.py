"""
SQLAlchemy Message Repository Implementation.

ORM Message row:
    id, conversation_id, user_id, content, reply_to_id (self FK, SET NULL),
    edited_at, created_at, updated_at

Domain Message Entity:
    @dataclass
    class Message:
        id: MessageId
        conversation_id: ConversationId
        user_id: UserId
        content: str
        created_at: datetime
        updated_at: datetime
        reply_to_id: Optional[MessageId] = None
        edited_at: Optional[datetime] = None

Ordering for pages is created_at desc, then id desc, so equal timestamps
still paginate deterministically.
"""

import logging
from typing import Iterable, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from roomchat.domain.entities.message import Message
from roomchat.domain.ports.repositories.message_repository import MessageRepository
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.user_id import UserId
from roomchat.infrastructure.persistence.database import as_utc
from roomchat.infrastructure.persistence.models import MessageModel

logger = logging.getLogger(__name__)


class SqlAlchemyMessageRepository(MessageRepository):
    """
    SQLAlchemy implementation of MessageRepository.

    Handles persistence of Message entities through the request's AsyncSession.
    """

    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with a session.

        Args:
            session: Request-scoped AsyncSession (injected by DI container)
        """
        self._session = session

    def _to_entity(self, record: MessageModel) -> Message:
        """
        Map ORM row to domain entity.

        Args:
            record: MessageModel instance

        Returns:
            Domain Message entity with value objects
        """
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            user_id=UserId(record.user_id),
            content=record.content,
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
            reply_to_id=MessageId(record.reply_to_id) if record.reply_to_id else None,
            edited_at=as_utc(record.edited_at),
        )

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        """
        Get message by ID.

        Args:
            message_id: MessageId value object

        Returns:
            Message entity if found, None otherwise
        """
        record = await self._session.get(MessageModel, message_id.value)
        return self._to_entity(record) if record else None

    async def get_many(
        self, message_ids: Iterable[MessageId]
    ) -> dict[MessageId, Message]:
        ids = {message_id.value for message_id in message_ids}
        if not ids:
            return {}
        result = await self._session.execute(
            select(MessageModel).where(MessageModel.id.in_(ids))
        )
        messages = [self._to_entity(record) for record in result.scalars().all()]
        return {message.id: message for message in messages}

    async def get_page(
        self, conversation_id: ConversationId, page: int, per_page: int
    ) -> tuple[list[Message], int]:
        """
        Get one page of a conversation's messages, newest first.

        Args:
            conversation_id: ConversationId value object
            page: 1-based page number
            per_page: Page size

        Returns:
            (messages on the page, total messages in the conversation)
        """
        total = await self._session.scalar(
            select(func.count())
            .select_from(MessageModel)
            .where(MessageModel.conversation_id == conversation_id.value)
        )
        result = await self._session.execute(
            select(MessageModel)
            .where(MessageModel.conversation_id == conversation_id.value)
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        messages = [self._to_entity(record) for record in result.scalars().all()]
        return messages, int(total or 0)

    async def add(self, message: Message) -> None:
        self._session.add(
            MessageModel(
                id=message.id.value,
                conversation_id=message.conversation_id.value,
                user_id=message.user_id.value,
                content=message.content,
                reply_to_id=message.reply_to_id.value if message.reply_to_id else None,
                edited_at=message.edited_at,
                created_at=message.created_at,
                updated_at=message.updated_at,
            )
        )
        await self._session.flush()

    async def update(self, message: Message) -> None:
        """Persist content changes. Conversation, author and reply target never change."""
        record = await self._session.get(MessageModel, message.id.value)
        if record is None:
            raise LookupError(f"Message {message.id.value} does not exist")

        record.content = message.content
        record.edited_at = message.edited_at
        record.updated_at = message.updated_at
        await self._session.flush()

    async def delete(self, message_id: MessageId) -> bool:
        """
        Delete message by ID.

        Replies pointing at the message are detached (reply_to_id = NULL),
        never deleted.

        Returns:
            True if deleted, False if not found
        """
        detached = await self._session.execute(
            update(MessageModel)
            .where(MessageModel.reply_to_id == message_id.value)
            .values(reply_to_id=None)
        )
        result = await self._session.execute(
            delete(MessageModel).where(MessageModel.id == message_id.value)
        )
        if detached.rowcount:
            logger.info(
                f"[message_repository] Detached {detached.rowcount} replies from {message_id.value}"
            )
        return result.rowcount > 0
