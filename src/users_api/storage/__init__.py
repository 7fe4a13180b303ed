"""User storage: schemas, repositories and their FastAPI dependencies."""

from users_api.storage.dependencies import get_user_repository
from users_api.storage.repositories import InMemoryUserRepository, UserRepository
from users_api.storage.schemas import UserSchema

__all__ = [
    "InMemoryUserRepository",
    "UserRepository",
    "UserSchema",
    "get_user_repository",
]
