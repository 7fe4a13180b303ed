"""API layer modules exposed by the backend."""

from users_api.api.app import create_api

__all__ = ["create_api"]
