"""
Conversation Authorization Service - the single gate for conversation and
message access.

Two predicates over the current roster:
- is_participant: a Participant row exists for (conversation, user)
- is_creator: the conversation exists and was created by the user

Every check re-reads the store; nothing is cached between calls. The checks
are read-then-act and hold no locks, so writers that depend on them (adding
a participant) rely on database constraints for the final word.
"""

import logging

from roomchat.domain.entities.conversation import Conversation
from roomchat.domain.exceptions import (
    ConversationNotFoundError,
    NotAParticipantError,
    NotCreatorError,
)
from roomchat.domain.ports.repositories import (
    ConversationRepository,
    ParticipantRepository,
)
from roomchat.domain.value_objects.conversation_id import ConversationId
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class ConversationAuthorizationService:
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
    ):
        self._conversation_repository = conversation_repository
        self._participant_repository = participant_repository

    async def is_participant(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> bool:
        """A missing conversation simply has no matching row."""
        participant = await self._participant_repository.get(conversation_id, user_id)
        return participant is not None

    async def is_creator(self, conversation_id: ConversationId, user_id: UserId) -> bool:
        conversation = await self._conversation_repository.get_by_id(conversation_id)
        if conversation is None:
            return False
        return conversation.is_created_by(user_id)

    async def ensure_participant(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> None:
        if not await self.is_participant(conversation_id, user_id):
            logger.warning(
                f"[authz] User {user_id.value} is not a participant of {conversation_id.value}"
            )
            raise NotAParticipantError()

    async def ensure_creator(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> None:
        if not await self.is_creator(conversation_id, user_id):
            logger.warning(
                f"[authz] User {user_id.value} is not the creator of {conversation_id.value}"
            )
            raise NotCreatorError()

    async def get_conversation_for_user(
        self, conversation_id: ConversationId, user_id: UserId
    ) -> Conversation:
        """
        Load a conversation the caller may read.

        Existence is checked before membership so callers can tell
        "no such conversation" from "not a member".

        Raises:
            ConversationNotFoundError: conversation does not exist
            NotAParticipantError: conversation exists but caller is not in it
        """
        conversation = await self._conversation_repository.get_by_id(conversation_id)
        if conversation is None:
            raise ConversationNotFoundError()

        await self.ensure_participant(conversation_id, user_id)
        return conversation
