"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)


class ConversationNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "Conversation not found"):
        super().__init__(message)


class MessageNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "Message not found"):
        super().__init__(message)


class UserNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class ParticipantNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "Participant not found"):
        super().__init__(message)


class ReplyTargetNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "Message to reply to not found"):
        super().__init__(message)
