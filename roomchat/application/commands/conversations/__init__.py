"""Conversation commands."""

from .create_conversation import CreateConversationCommand, CreateConversationHandler
from .update_conversation import UpdateConversationCommand, UpdateConversationHandler
from .delete_conversation import DeleteConversationCommand, DeleteConversationHandler
from .add_participant import AddParticipantCommand, AddParticipantHandler
from .remove_participant import RemoveParticipantCommand, RemoveParticipantHandler

__all__ = [
    "CreateConversationCommand",
    "CreateConversationHandler",
    "UpdateConversationCommand",
    "UpdateConversationHandler",
    "DeleteConversationCommand",
    "DeleteConversationHandler",
    "AddParticipantCommand",
    "AddParticipantHandler",
    "RemoveParticipantCommand",
    "RemoveParticipantHandler",
]
