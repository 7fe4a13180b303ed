"""User resource endpoints."""

from __future__ import annotations

from typing import Any, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Response, status

from users_api.api.dependencies import get_json_body, get_user_id, get_user_service
from users_api.api.models import UserResponse
from users_api.api.services import (
    UserNotFoundError,
    UserService,
    UserServiceError,
)

router = APIRouter(prefix="/api/users", tags=["users"])


def _raise_http_error(exc: UserServiceError) -> NoReturn:
    if isinstance(exc, UserNotFoundError):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
    ) from exc


@router.get("", response_model=list[UserResponse])
def list_users(
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Return every stored user."""

    return [
        UserResponse.model_validate(user, from_attributes=True)
        for user in service.list_users()
    ]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Any = Depends(get_json_body),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Validate the payload and store a new user."""

    try:
        user = service.create_user(payload)
    except UserServiceError as exc:
        _raise_http_error(exc)
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int = Depends(get_user_id),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = service.get_user(user_id)
    except UserServiceError as exc:
        _raise_http_error(exc)
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int = Depends(get_user_id),
    payload: Any = Depends(get_json_body),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Replace the name and email of an existing user."""

    try:
        user = service.update_user(user_id, payload)
    except UserServiceError as exc:
        _raise_http_error(exc)
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_user(
    user_id: int = Depends(get_user_id),
    service: UserService = Depends(get_user_service),
) -> Response:
    try:
        service.delete_user(user_id)
    except UserServiceError as exc:
        _raise_http_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
