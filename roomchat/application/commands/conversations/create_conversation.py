"""
Create Conversation Command.

- The creator always becomes the first participant
- Other ids are de-duplicated and the creator's own id is dropped from them
- Every other id must resolve to an existing user; the check runs before
  anything is written, and all rows commit together, so a rejected request
  leaves no conversation behind
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from roomchat.application.common.interfaces import Command, CommandHandler
from roomchat.application.services.view_assembler import ConversationView, ViewAssembler
from roomchat.domain.entities.conversation import Conversation
from roomchat.domain.entities.participant import Participant
from roomchat.domain.exceptions import InvalidParticipantError
from roomchat.domain.ports.repositories import (
    ConversationRepository,
    ParticipantRepository,
    UserRepository,
)
from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateConversationCommand(Command[ConversationView]):
    creator_id: UserId
    participant_ids: tuple[UserId, ...] = field(default_factory=tuple)
    name: Optional[str] = None
    description: Optional[str] = None


class CreateConversationHandler(CommandHandler[ConversationView]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        participant_repository: ParticipantRepository,
        user_repository: UserRepository,
        view_assembler: ViewAssembler,
        uow: UnitOfWork,
    ):
        self._conversation_repository = conversation_repository
        self._participant_repository = participant_repository
        self._user_repository = user_repository
        self._view_assembler = view_assembler
        self._uow = uow

    async def execute(self, command: CreateConversationCommand) -> ConversationView:
        others = [
            user_id
            for user_id in dict.fromkeys(command.participant_ids)
            if user_id != command.creator_id
        ]
        if others:
            found = await self._user_repository.get_many(others)
            if len(found) != len(others):
                missing = [u.value for u in others if u not in found]
                logger.warning(f"[conversations] Unknown participant ids: {missing}")
                raise InvalidParticipantError()

        conversation = Conversation.create(
            created_by=command.creator_id,
            name=command.name,
            description=command.description,
        )
        await self._conversation_repository.add(conversation)

        roster = [Participant.join(conversation.id, command.creator_id)]
        roster.extend(Participant.join(conversation.id, user_id) for user_id in others)
        await self._participant_repository.add_many(roster)
        await self._uow.commit()

        logger.info(
            f"[conversations] Created {conversation.id.value} by {command.creator_id.value} "
            f"with {len(roster)} participants"
        )
        return await self._view_assembler.conversation_view(conversation)
