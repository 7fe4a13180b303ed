"""Repository helpers for working with users."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime
from typing import Protocol

from users_api.storage.schemas import UserSchema


def _utcnow() -> datetime:
    return datetime.now(UTC)


class UserRepository(Protocol):
    """Persistence operations the API layer relies on."""

    def list_all(self) -> list[UserSchema]: ...

    def add(self, *, name: str, email: str) -> UserSchema: ...

    def get_by_id(self, user_id: int) -> UserSchema | None: ...

    def update(self, user_id: int, *, name: str, email: str) -> UserSchema | None: ...

    def delete(self, user_id: int) -> bool: ...


class InMemoryUserRepository:
    """Thread-safe :class:`UserRepository` backed by a dict keyed by id."""

    def __init__(self, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._users: dict[int, UserSchema] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list_all(self) -> list[UserSchema]:
        """Return every user in insertion order."""
        with self._lock:
            return list(self._users.values())

    def add(self, *, name: str, email: str) -> UserSchema:
        """Store a new user with a fresh id and matching timestamps."""
        with self._lock:
            timestamp = self._clock()
            user = UserSchema(
                id=next(self._ids),
                name=name,
                email=email,
                created_at=timestamp,
                updated_at=timestamp,
            )
            self._users[user.id] = user
            return user

    def get_by_id(self, user_id: int) -> UserSchema | None:
        """Return user entity by user's ID."""
        with self._lock:
            return self._users.get(user_id)

    def update(self, user_id: int, *, name: str, email: str) -> UserSchema | None:
        """Overwrite mutable fields, keeping ``id`` and ``created_at``."""
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                return None
            user = replace(
                current,
                name=name,
                email=email,
                # a clock that steps backwards must not break created_at <= updated_at
                updated_at=max(self._clock(), current.created_at),
            )
            self._users[user_id] = user
            return user

    def delete(self, user_id: int) -> bool:
        """Remove a user, reporting whether it existed."""
        with self._lock:
            return self._users.pop(user_id, None) is not None
