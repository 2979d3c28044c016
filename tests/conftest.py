"""Pytest configuration and shared fixtures."""

import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from hello_webapp.config import Settings, get_settings
from hello_webapp.main import app as fastapi_app


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def test_settings():
    """Settings instance with test values, isolated from the environment."""
    return Settings(
        _env_file=None,
        api_host="127.0.0.1",
        api_port=8080,
        server_info="Test Server/1.0",
        escape_html=True,
    )


@pytest.fixture
def override_settings():
    """Install a Settings override on the app; cleared after the test."""

    def _override(settings: Settings) -> None:
        fastapi_app.dependency_overrides[get_settings] = lambda: settings

    yield _override
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def make_request():
    """Build a bare Starlette request for unit tests."""

    def _make(
        method: str = "GET",
        path: str = "/hello",
        query_string: bytes = b"",
        body: bytes = b"",
        content_type: str | None = None,
    ) -> Request:
        headers = [(b"host", b"testserver")]
        if content_type:
            headers.append((b"content-type", content_type.encode("latin-1")))

        scope = {
            "type": "http",
            "http_version": "1.1",
            "method": method,
            "scheme": "http",
            "server": ("testserver", 80),
            "root_path": "",
            "path": path,
            "query_string": query_string,
            "headers": headers,
        }

        async def receive():
            return {"type": "http.request", "body": body, "more_body": False}

        return Request(scope, receive)

    return _make
