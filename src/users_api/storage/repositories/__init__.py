"""Repositories owning user storage."""

from users_api.storage.repositories.user import InMemoryUserRepository, UserRepository

__all__ = ["InMemoryUserRepository", "UserRepository"]
