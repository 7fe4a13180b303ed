"""Storage schemas."""

from users_api.storage.schemas.user import UserSchema

__all__ = ["UserSchema"]
