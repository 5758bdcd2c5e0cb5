"""
AccessDeniedError - Raised when user lacks permission to access a resource.
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when user lacks permission to access a resource"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class NotAParticipantError(AccessDeniedError):
    def __init__(self, message: str = "You are not a participant in this conversation"):
        super().__init__(message)


class NotCreatorError(AccessDeniedError):
    def __init__(self, message: str = "Only the creator can modify this conversation"):
        super().__init__(message)


class NotMessageOwnerError(AccessDeniedError):
    def __init__(self, message: str = "You can only modify your own messages"):
        super().__init__(message)
