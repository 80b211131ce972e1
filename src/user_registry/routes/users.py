"""User API routes."""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from user_registry.errors import UserConflictError, UserNotFoundError
from user_registry.models.user import ErrorResponse, User, UserCreate, UserUpdate
from user_registry.services import UserRegistry, get_user_registry
from user_registry.validation import json_request_body, parse_user_create, parse_user_update, read_json_object

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

INVALID_BODY_RESPONSES: dict[int | str, dict] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid request body"},
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: {"model": ErrorResponse, "description": "Body is not application/json"},
}


@router.get("/data", response_model=list[User], summary="Retrieve a list of users")
async def list_users(registry: UserRegistry = Depends(get_user_registry)) -> list[User]:
    return registry.list_users()


@router.get(
    "/data/{user_id}",
    response_model=User,
    summary="Retrieve a single user by ID",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "User not found"}},
)
async def get_user(user_id: str, registry: UserRegistry = Depends(get_user_registry)) -> User:
    user = registry.get_user(user_id)
    if user is None:
        raise UserNotFoundError("User not found")
    return user


@router.post(
    "/data",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new user",
    responses=INVALID_BODY_RESPONSES,
    openapi_extra=json_request_body(UserCreate),
)
async def add_user(request: Request, registry: UserRegistry = Depends(get_user_registry)) -> User:
    """Create a user from ``id``, ``Firstname`` and ``Surname``.

    The id must not exist yet and no other fields are allowed.
    """
    payload = await read_json_object(request)
    user = parse_user_create(payload).to_user()
    if not registry.add_user(user):
        logger.info("Rejected duplicate user id %s", user.id)
        raise UserConflictError()
    return user


@router.delete(
    "/user/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user by ID",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "User not found"}},
)
async def delete_user(user_id: str, registry: UserRegistry = Depends(get_user_registry)) -> None:
    if not registry.delete_user(user_id):
        raise UserNotFoundError("user not found")
    return None


@router.put(
    "/users/{user_id}",
    response_model=User,
    summary="Update a user, or create it if it does not exist",
    responses={
        status.HTTP_201_CREATED: {"model": User, "description": "User created"},
        **INVALID_BODY_RESPONSES,
    },
    openapi_extra=json_request_body(UserUpdate),
)
async def upsert_user(
    user_id: str,
    request: Request,
    response: Response,
    registry: UserRegistry = Depends(get_user_registry),
) -> User:
    """Replace the names of a user, creating the user when the id is new.

    Returns 200 for an update and 201 for a creation. The stored id is always
    the path parameter; an ``id`` in the body is ignored.
    """
    payload = await read_json_object(request)
    update = parse_user_update(payload)
    user, created = registry.upsert_user(user_id, update.first_name, update.surname)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return user
