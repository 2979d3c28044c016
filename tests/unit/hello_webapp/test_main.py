"""Unit tests for app assembly, error handlers and lifecycle."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hello_webapp.exceptions import WebAppException
from hello_webapp.main import app
from hello_webapp.middleware.error_handlers import register_error_handlers


class TestExceptionHandlers:
    """Tests for exception handlers."""

    def test_webapp_exception_handler_exists(self):
        """Test that WebAppException handler is registered."""
        assert WebAppException in app.exception_handlers
        assert Exception in app.exception_handlers

    def test_webapp_exception_becomes_json(self):
        """Test that WebAppException maps to a structured JSON error."""
        error_app = FastAPI()
        register_error_handlers(error_app)

        @error_app.get("/boom")
        async def boom():
            raise WebAppException("Broken", status_code=503, details={"why": "test"})

        response = TestClient(error_app).get("/boom")

        assert response.status_code == 503
        assert response.json() == {"error": {"code": "WEBAPP_ERROR", "message": "Broken", "details": {"why": "test"}}}

    def test_unhandled_exception_hides_details(self):
        """Test that unexpected errors return a generic 500."""
        error_app = FastAPI()
        register_error_handlers(error_app)

        @error_app.get("/boom")
        async def boom():
            raise ValueError("secret internals")

        response = TestClient(error_app, raise_server_exceptions=False).get("/boom")

        assert response.status_code == 500
        assert response.json() == {"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}}
        assert "secret internals" not in response.text


class TestLifecycle:
    """Tests for app lifecycle events."""

    @pytest.mark.parametrize("path", ["/", "/hello", "/health", "/favicon.ico"])
    def test_app_serves_routes(self, test_client, path):
        """Test that each expected route is served."""
        response = test_client.get(path)

        assert response.status_code == 200

    def test_unknown_route_is_404(self, test_client):
        """Test that unregistered paths are not served."""
        assert test_client.get("/missing").status_code == 404

    def test_lifespan_sets_state(self, test_client):
        """Test that startup records time and counts requests."""
        assert test_client.app.state.startup_time > 0
        before = test_client.app.state.request_count

        test_client.get("/health")
        test_client.get("/health")

        assert test_client.app.state.request_count == before + 2


class TestRootEndpoints:
    """Tests for root-level endpoints."""

    def test_root_endpoint(self, test_client):
        """Test root endpoint points at the greeting page."""
        response = test_client.get("/")

        assert response.status_code == 200
        assert response.json()["hello"] == "/hello"

    def test_health_endpoint(self, test_client):
        """Test health check endpoint returns status."""
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert "version" in response.json()

    def test_favicon(self, test_client):
        """Test favicon returns an empty icon."""
        response = test_client.get("/favicon.ico")

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["content-type"] == "image/x-icon"
