from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from users_api.settings import BackendSettings
from users_api.storage import dependencies

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _clear_repository_cache() -> Iterator[None]:
    dependencies._build_user_repository.cache_clear()
    yield
    dependencies._build_user_repository.cache_clear()


def test_repository_is_shared_between_calls() -> None:
    settings = BackendSettings()

    assert dependencies.get_user_repository(settings) is dependencies.get_user_repository(
        settings
    )


def test_demo_users_are_seeded_when_enabled() -> None:
    repository = dependencies.get_user_repository(BackendSettings(seed_demo_users=True))

    assert [user.name for user in repository.list_all()] == ["João Silva", "Maria Santos"]


def test_repository_starts_empty_by_default() -> None:
    repository = dependencies.get_user_repository(BackendSettings())

    assert repository.list_all() == []
