"""
Participant Repository Port - the (conversation, user) membership roster.
Implementation: roomchat/infrastructure/persistence/sqlalchemy_participant_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from roomchat.domain.entities.participant import Participant
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId


class ParticipantRepository(ABC):
    @abstractmethod
    async def get(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Optional[Participant]: ...

    @abstractmethod
    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Participant]:
        """Roster ordered by join time, oldest first."""
        ...

    @abstractmethod
    async def add(self, participant: Participant) -> None:
        """Stage a membership row.

        Raises:
            AlreadyParticipantError: the pair already exists (uniqueness constraint)
        """
        ...

    @abstractmethod
    async def add_many(self, participants: list[Participant]) -> None: ...

    @abstractmethod
    async def delete(self, participant: Participant) -> None: ...
