"""
InvalidOperationError - Raised when a request conflicts with current state
in a way the client can correct.
Maps to: HTTP 400 Bad Request
"""


class InvalidOperationError(Exception):
    """Client-correctable conflict with existing state."""

    def __init__(self, message: str = "Invalid operation"):
        super().__init__(message)


class AlreadyParticipantError(InvalidOperationError):
    def __init__(self, message: str = "User is already a participant"):
        super().__init__(message)


class InvalidParticipantError(InvalidOperationError):
    def __init__(self, message: str = "One or more participant IDs are invalid"):
        super().__init__(message)


class ReplyTargetCrossConversationError(InvalidOperationError):
    def __init__(
        self, message: str = "Cannot reply to a message from a different conversation"
    ):
        super().__init__(message)
