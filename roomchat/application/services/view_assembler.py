"""
View Assembler - builds the read models returned by handlers.

Reply previews are resolved by id lookup and are one level deep: a reply
preview carries the target's content and author, never the target's own
reply target.
"""

from dataclasses import dataclass, field
from typing import Optional

from roomchat.domain.entities.conversation import Conversation
from roomchat.domain.entities.message import Message
from roomchat.domain.entities.participant import Participant
from roomchat.domain.entities.user import User
from roomchat.domain.ports.repositories import (
    MessageRepository,
    ParticipantRepository,
    UserRepository,
)


@dataclass(frozen=True)
class ParticipantView:
    participant: Participant
    user: Optional[User]


@dataclass(frozen=True)
class ConversationView:
    conversation: Conversation
    creator: Optional[User]
    participants: list[ParticipantView] = field(default_factory=list)


@dataclass(frozen=True)
class ReplyView:
    message: Message
    author: Optional[User]


@dataclass(frozen=True)
class MessageView:
    message: Message
    author: Optional[User]
    reply_to: Optional[ReplyView] = None
    conversation: Optional[Conversation] = None


class ViewAssembler:
    def __init__(
        self,
        user_repository: UserRepository,
        participant_repository: ParticipantRepository,
        message_repository: MessageRepository,
    ):
        self._user_repository = user_repository
        self._participant_repository = participant_repository
        self._message_repository = message_repository

    async def conversation_views(
        self, conversations: list[Conversation]
    ) -> list[ConversationView]:
        rosters = {
            conversation.id: await self._participant_repository.get_by_conversation(
                conversation.id
            )
            for conversation in conversations
        }
        user_ids = {conversation.created_by for conversation in conversations}
        for roster in rosters.values():
            user_ids.update(participant.user_id for participant in roster)
        users = await self._user_repository.get_many(user_ids)

        return [
            ConversationView(
                conversation=conversation,
                creator=users.get(conversation.created_by),
                participants=[
                    ParticipantView(participant=p, user=users.get(p.user_id))
                    for p in rosters[conversation.id]
                ],
            )
            for conversation in conversations
        ]

    async def conversation_view(self, conversation: Conversation) -> ConversationView:
        views = await self.conversation_views([conversation])
        return views[0]

    async def message_views(
        self, messages: list[Message], conversation: Optional[Conversation] = None
    ) -> list[MessageView]:
        targets = await self._message_repository.get_many(
            m.reply_to_id for m in messages if m.reply_to_id
        )
        user_ids = {m.user_id for m in messages}
        user_ids.update(target.user_id for target in targets.values())
        users = await self._user_repository.get_many(user_ids)

        views = []
        for message in messages:
            reply_to = None
            target = targets.get(message.reply_to_id) if message.reply_to_id else None
            if target is not None:
                reply_to = ReplyView(message=target, author=users.get(target.user_id))
            views.append(
                MessageView(
                    message=message,
                    author=users.get(message.user_id),
                    reply_to=reply_to,
                    conversation=conversation,
                )
            )
        return views

    async def message_view(
        self, message: Message, conversation: Optional[Conversation] = None
    ) -> MessageView:
        views = await self.message_views([message], conversation=conversation)
        return views[0]
