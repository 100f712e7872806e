"""
Domain exceptions raised by services and rendered by the API layer.
"""
from fastapi import status


class PocketWatcherError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Something went wrong"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PocketWatcherError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class DuplicateIdentity(PocketWatcherError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email is already registered!"


class InvalidCredentials(PocketWatcherError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid email or password"


class AuthRequired(PocketWatcherError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Please authenticate using a valid token"


class InvalidToken(PocketWatcherError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"


class Forbidden(PocketWatcherError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied: not your record"


class NotFound(PocketWatcherError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Record not found"


class Internal(PocketWatcherError):
    default_message = "Internal server error"
