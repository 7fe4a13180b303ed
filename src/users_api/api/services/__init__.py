"""Service layer for API-specific business logic."""

from users_api.api.services.users import (
    BadRequestError,
    UserNotFoundError,
    UserService,
    UserServiceError,
    UserValidationError,
    parse_user_id,
    validate_user_request,
)

__all__ = [
    "BadRequestError",
    "UserNotFoundError",
    "UserService",
    "UserServiceError",
    "UserValidationError",
    "parse_user_id",
    "validate_user_request",
]
