"""Models used for API request and response payloads."""

from users_api.api.models.health import HealthResponse
from users_api.api.models.user import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "HealthResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
