"""
Conversation Repository Port - Interface for conversation persistence.
Implementation: roomchat/infrastructure/persistence/sqlalchemy_conversation_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from roomchat.domain.entities.conversation import Conversation
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def get_by_participant(self, user_id: UserId) -> list[Conversation]:
        """Conversations the user participates in, newest-created first."""
        ...

    @abstractmethod
    async def add(self, conversation: Conversation) -> None: ...

    @abstractmethod
    async def update(self, conversation: Conversation) -> None: ...

    @abstractmethod
    async def delete(self, conversation_id: ConversationId) -> bool:
        """Delete the conversation together with its participants and messages."""
        ...
