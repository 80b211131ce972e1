"""Request body validation for the user write endpoints.

Checks run in a fixed order so that the status code is predictable when a
request has several problems: content type (415), JSON decoding (400),
missing fields (400), unknown fields (400), field types (400).
"""

import logging
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from user_registry.errors import InvalidBodyError, UnsupportedMediaTypeError
from user_registry.models.user import USER_CREATE_FIELDS, USER_UPDATE_FIELDS, UserCreate, UserUpdate

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"

ModelT = TypeVar("ModelT", bound=BaseModel)


def is_json_content_type(content_type: str | None) -> bool:
    """Check that a Content-Type header names JSON, ignoring parameters."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE


async def read_json_object(request: Request) -> dict[str, Any]:
    """Decode the request body as a JSON object.

    Raises:
        UnsupportedMediaTypeError: If Content-Type is not application/json
        InvalidBodyError: If the body is not a JSON object
    """
    if not is_json_content_type(request.headers.get("content-type")):
        raise UnsupportedMediaTypeError()

    try:
        payload = await request.json()
    except ValueError as exc:
        logger.debug("Rejected malformed JSON body: %s", exc)
        raise InvalidBodyError("Request body must be valid JSON") from exc

    if not isinstance(payload, dict):
        raise InvalidBodyError("Request body must be a JSON object")
    return payload


def _is_missing(payload: dict[str, Any], field: str) -> bool:
    # Falsy values (null, "", 0, false, [], {}) count as absent
    return not payload.get(field)


def _field_list(fields: tuple[str, ...]) -> str:
    return ", ".join(fields)


def _validate(model: type[ModelT], payload: dict[str, Any], fields: tuple[str, ...]) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise InvalidBodyError(f"Fields {_field_list(fields)} must be non-empty strings") from exc


def parse_user_create(payload: dict[str, Any]) -> UserCreate:
    """Validate the body of a create request.

    The body must hold exactly ``id``, ``Firstname`` and ``Surname``.
    """
    if any(_is_missing(payload, field) for field in USER_CREATE_FIELDS):
        raise InvalidBodyError(f"Missing required fields: {_field_list(USER_CREATE_FIELDS)}")

    if set(payload) != set(USER_CREATE_FIELDS):
        raise InvalidBodyError("Only id, Firstname, and Surname are allowed in the request body")

    return _validate(UserCreate, payload, USER_CREATE_FIELDS)


def parse_user_update(payload: dict[str, Any]) -> UserUpdate:
    """Validate the body of an update request. Unknown keys are ignored."""
    if any(_is_missing(payload, field) for field in USER_UPDATE_FIELDS):
        raise InvalidBodyError(f"Missing required fields: {_field_list(USER_UPDATE_FIELDS)}")

    return _validate(UserUpdate, payload, USER_UPDATE_FIELDS)


def json_request_body(model: type[BaseModel]) -> dict[str, Any]:
    """OpenAPI ``requestBody`` for handlers that read the raw request."""
    return {
        "requestBody": {
            "required": True,
            "content": {JSON_MEDIA_TYPE: {"schema": model.model_json_schema(by_alias=True)}},
        }
    }
