"""CRUD endpoints for the user resource."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status

from users_api.api.dependencies import get_user_repository
from users_api.errors import INTERNAL_ERROR_MESSAGE, ApiError
from users_api.logging import get_logger
from users_api.models import MessageResponse, User, UserCreateRequest
from users_api.repositories.base import UserRepository
from users_api.validators import is_valid_email

NAME_REQUIRED_MESSAGE = "Name is required."
EMAIL_INVALID_MESSAGE = "A valid email is required."
USER_NOT_FOUND_MESSAGE = "User not found."

router = APIRouter(prefix="/users", tags=["users"])
_logger = get_logger("users")

Repository = Annotated[UserRepository, Depends(get_user_repository)]

_not_found = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}


def _internal_error(operation: str) -> ApiError:
    _logger.exception("users.%s failed", operation)
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def _validate_create(payload: Any) -> tuple[str, str]:
    """Return the trimmed name and email or raise a 400 error."""

    data = UserCreateRequest.model_validate(payload if isinstance(payload, dict) else {})
    if not isinstance(data.name, str) or not data.name.strip():
        raise ApiError(status.HTTP_400_BAD_REQUEST, NAME_REQUIRED_MESSAGE)
    if not is_valid_email(data.email):
        raise ApiError(status.HTTP_400_BAD_REQUEST, EMAIL_INVALID_MESSAGE)
    return data.name.strip(), data.email.strip()


@router.post(
    "",
    summary="Create a user",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
async def create_user(
    repository: Repository,
    payload: Annotated[Any, Body()] = None,
) -> User:
    """Validate the payload and store a new user."""

    name, email = _validate_create(payload)
    try:
        user = await repository.create(name, email)
    except Exception:
        raise _internal_error("create")
    _logger.info("users.created id=%s", user.id)
    return user


@router.get("", summary="List users", response_model=list[User])
async def list_users(repository: Repository) -> list[User]:
    """Return every user in creation order."""

    try:
        return await repository.list()
    except Exception:
        raise _internal_error("list")


@router.get("/{user_id}", summary="Get a user", response_model=User, responses=_not_found)
async def get_user(user_id: str, repository: Repository) -> User:
    try:
        user = await repository.get_by_id(user_id)
    except Exception:
        raise _internal_error("get")
    if user is None:
        raise ApiError(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND_MESSAGE)
    return user


@router.delete(
    "/{user_id}",
    summary="Delete a user",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_not_found,
)
async def delete_user(user_id: str, repository: Repository) -> Response:
    try:
        deleted = await repository.delete_by_id(user_id)
    except Exception:
        raise _internal_error("delete")
    if not deleted:
        raise ApiError(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND_MESSAGE)
    _logger.info("users.deleted id=%s", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
