"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, HTTPException, Request, status

from users_api.api.services import BadRequestError, UserService, parse_user_id
from users_api.storage import UserRepository, get_user_repository


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """Return a :class:`UserService` bound to the shared repository."""

    return UserService(repository)


def get_user_id(user_id: str) -> int:
    """Resolve the ``{user_id}`` path segment into an integer id."""

    try:
        return parse_user_id(user_id)
    except BadRequestError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc


async def get_json_body(request: Request) -> Any:
    """Decode the request body as JSON without validating its shape."""

    try:
        return await request.json()
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be valid JSON",
        ) from exc


__all__ = ["get_json_body", "get_user_id", "get_user_service"]
