"""Users API package wiring and entrypoints."""

from users_api.main import run_dev, run_prod
from users_api.settings import BackendSettings, get_settings

__all__ = [
    "BackendSettings",
    "get_settings",
    "run_dev",
    "run_prod",
]
