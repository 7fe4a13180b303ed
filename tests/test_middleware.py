from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pytest
    from fastapi.testclient import TestClient

    from users_api.storage import InMemoryUserRepository

MIDDLEWARE_LOGGER = "users_api.api.middleware"


def test_cors_headers_on_simple_request(client: TestClient) -> None:
    response = client.get("/health", headers={"Origin": "http://example.com"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight_short_circuits(
    client: TestClient, repository: InMemoryUserRepository
) -> None:
    response = client.options(
        "/api/users",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert response.status_code == 200
    assert "POST" in response.headers["access-control-allow-methods"]
    assert len(repository) == 0


def test_request_logging_records_method_path_and_status(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger=MIDDLEWARE_LOGGER)

    client.get("/api/users/999")

    messages = [
        record.getMessage()
        for record in caplog.records
        if record.name == MIDDLEWARE_LOGGER
    ]
    assert "Request: GET /api/users/999" in messages
    assert any(
        message.startswith("Response: GET /api/users/999 404 ") for message in messages
    )


def test_request_logging_wraps_preflight(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger=MIDDLEWARE_LOGGER)

    client.options(
        "/api/users",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert any(
        record.getMessage().startswith("Response: OPTIONS /api/users 200 ")
        for record in caplog.records
        if record.name == MIDDLEWARE_LOGGER
    )


def test_plain_options_short_circuits(
    client: TestClient, repository: InMemoryUserRepository
) -> None:
    response = client.options("/api/users")

    assert response.status_code == 204
    assert response.content == b""
    assert "POST" in response.headers["allow"]
    assert len(repository) == 0


def test_options_with_origin_only_gets_cors_headers(client: TestClient) -> None:
    response = client.options(
        "/api/users/1", headers={"Origin": "http://example.com"}
    )

    assert response.status_code == 204
    assert response.headers["access-control-allow-origin"] == "*"
    assert "DELETE" in response.headers["access-control-allow-methods"]


def test_options_on_unknown_path_does_not_reach_router(client: TestClient) -> None:
    assert client.options("/api/unknown").status_code == 204
