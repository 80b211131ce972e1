"""Tests for the API error taxonomy."""

import pytest

from user_registry.errors import (
    APIError,
    InvalidBodyError,
    UnsupportedMediaTypeError,
    UserConflictError,
    UserNotFoundError,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error", "status_code", "message"),
    [
        (UnsupportedMediaTypeError(), 415, "Unsupported Media Type. Content-Type must be application/json"),
        (InvalidBodyError("Request body must be a JSON object"), 400, "Request body must be a JSON object"),
        (UserConflictError(), 400, "User with this ID already exists"),
        (UserNotFoundError(), 404, "User not found"),
        (UserNotFoundError("user not found"), 404, "user not found"),
    ],
)
def test_error_status_and_message(error: APIError, status_code: int, message: str) -> None:
    assert error.status_code == status_code
    assert error.message == message
    assert str(error) == message


@pytest.mark.unit
@pytest.mark.parametrize(
    "error_class",
    [UnsupportedMediaTypeError, InvalidBodyError, UserConflictError, UserNotFoundError],
)
def test_error_classes_are_documented(error_class: type[APIError]) -> None:
    assert issubclass(error_class, APIError)
    assert error_class.__doc__
