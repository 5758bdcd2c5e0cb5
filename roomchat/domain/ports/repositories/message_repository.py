"""
Message Repository Port - Interface for message persistence.
Implementation: roomchat/infrastructure/persistence/sqlalchemy_message_repository.py
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from roomchat.domain.entities.message import Message
from roomchat.domain.value_objects.message_id import MessageId
from roomchat.domain.value_objects.conversation_id import ConversationId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def get_many(
        self, message_ids: Iterable[MessageId]
    ) -> dict[MessageId, Message]: ...

    @abstractmethod
    async def get_page(
        self, conversation_id: ConversationId, page: int, per_page: int
    ) -> tuple[list[Message], int]:
        """One page of messages, newest first, plus the conversation's total count."""
        ...

    @abstractmethod
    async def add(self, message: Message) -> None: ...

    @abstractmethod
    async def update(self, message: Message) -> None: ...

    @abstractmethod
    async def delete(self, message_id: MessageId) -> bool:
        """Delete the message; replies that pointed at it keep existing with reply_to_id cleared."""
        ...
