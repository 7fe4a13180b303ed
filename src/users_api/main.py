"""Users API entrypoint."""

from __future__ import annotations

import logging

import uvicorn

from users_api.api import create_api
from users_api.settings import get_settings

logger = logging.getLogger(__name__)

app = create_api()


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    logger.info("Server starting on port %s", config.port)
    try:
        uvicorn.run(
            "users_api.main:app",
            host=config.host,
            port=config.port,
            reload=reload,
            log_level=config.log_level.lower(),
        )
    except SystemExit as exc:
        # uvicorn reports bind errors itself and exits with its own status
        if exc.code in (None, 0):
            raise
        logger.critical(
            "Could not serve on %s:%s, shutting down", config.host, config.port
        )
        raise SystemExit(1) from exc


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)


if __name__ == "__main__":
    run_prod()
