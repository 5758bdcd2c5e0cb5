"""
AuthenticationError - Raised when the caller cannot be identified.
Maps to: HTTP 401 Unauthorized
"""


class AuthenticationError(Exception):
    def __init__(self, message: str = "Unauthorized access"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    def __init__(self, message: str = "Invalid user credentials"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = "Invalid or expired access token"):
        super().__init__(message)
