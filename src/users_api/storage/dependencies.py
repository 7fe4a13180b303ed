"""FastAPI dependencies for storage access."""

from functools import cache
from typing import Annotated

from fastapi import Depends

from users_api.settings import BackendSettings, get_settings
from users_api.storage.repositories import InMemoryUserRepository, UserRepository

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]

DEMO_USERS: tuple[tuple[str, str], ...] = (
    ("João Silva", "joao@email.com"),
    ("Maria Santos", "maria@email.com"),
)


@cache
def _build_user_repository(seed_demo_users: bool) -> InMemoryUserRepository:
    """Create the process-wide repository, optionally pre-loaded with demo users."""
    repository = InMemoryUserRepository()
    if seed_demo_users:
        for name, email in DEMO_USERS:
            repository.add(name=name, email=email)
    return repository


def get_user_repository(settings: SettingsDep) -> UserRepository:
    """Return the shared user repository."""
    return _build_user_repository(settings.seed_demo_users)
