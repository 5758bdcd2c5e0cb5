"""Message commands."""

from .create_message import CreateMessageCommand, CreateMessageHandler
from .update_message import UpdateMessageCommand, UpdateMessageHandler
from .delete_message import DeleteMessageCommand, DeleteMessageHandler

__all__ = [
    "CreateMessageCommand",
    "CreateMessageHandler",
    "UpdateMessageCommand",
    "UpdateMessageHandler",
    "DeleteMessageCommand",
    "DeleteMessageHandler",
]
