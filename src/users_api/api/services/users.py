"""User resource domain logic."""

from __future__ import annotations

import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from users_api.api.models import UserCreateRequest, UserUpdateRequest
from users_api.storage import UserRepository, UserSchema

_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

RequestT = TypeVar("RequestT", bound=BaseModel)


class UserServiceError(Exception):
    """Base class for errors surfaced by :class:`UserService`."""


class BadRequestError(UserServiceError):
    """Raised for a malformed user id or request body."""


class UserValidationError(UserServiceError):
    """Raised when a request body is missing fields or carries invalid ones."""


class UserNotFoundError(UserServiceError):
    """Raised when no user is stored under the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


def parse_user_id(raw: str) -> int:
    """Convert a path segment into a user id."""

    if _USER_ID_PATTERN.fullmatch(raw) is None:
        msg = f"Invalid user id: {raw!r}"
        raise BadRequestError(msg)
    try:
        return int(raw)
    except ValueError as exc:  # digit strings beyond the int conversion limit
        msg = f"Invalid user id: {raw!r}"
        raise BadRequestError(msg) from exc


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(item) for item in error["loc"]) or "body"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


def validate_user_request(payload: Any, model: type[RequestT]) -> RequestT:
    """Validate a decoded JSON body against ``model``.

    Raises :class:`UserValidationError` with one ``field: reason`` entry per
    failing field.
    """

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise UserValidationError(_describe(exc)) from exc


class UserService:
    """Coordinates validation and repository access for user endpoints."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def list_users(self) -> list[UserSchema]:
        return self._repository.list_all()

    def create_user(self, payload: Any) -> UserSchema:
        request = validate_user_request(payload, UserCreateRequest)
        return self._repository.add(name=request.name, email=request.email)

    def get_user(self, user_id: int) -> UserSchema:
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def update_user(self, user_id: int, payload: Any) -> UserSchema:
        request = validate_user_request(payload, UserUpdateRequest)
        user = self._repository.update(
            user_id, name=request.name, email=request.email
        )
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def delete_user(self, user_id: int) -> None:
        if not self._repository.delete(user_id):
            raise UserNotFoundError(user_id)
