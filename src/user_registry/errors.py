"""Errors raised by route handlers and rendered as ``{"error": ...}`` responses."""

from fastapi import status


class APIError(Exception):
    """Base class for client-facing errors.

    Subclasses fix the HTTP status; the message becomes the ``error`` field
    of the response body.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsupportedMediaTypeError(APIError):
    """Request body was not sent as ``application/json``."""

    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE

    def __init__(self, message: str = "Unsupported Media Type. Content-Type must be application/json") -> None:
        super().__init__(message)


class InvalidBodyError(APIError):
    """Request body is malformed, misses fields or carries unknown ones."""

    status_code = status.HTTP_400_BAD_REQUEST


class UserConflictError(APIError):
    """A user with the requested id already exists."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "User with this ID already exists") -> None:
        super().__init__(message)


class UserNotFoundError(APIError):
    """No user has the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)
