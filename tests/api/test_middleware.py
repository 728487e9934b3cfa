"""Tests for API middleware and health endpoints."""

from fastapi import Request
from fastapi.testclient import TestClient
from starlette.datastructures import Headers

from motoclub.api.middleware import client_address


def request_with_headers(headers: dict[str, str]) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": Headers(headers).raw,
    }
    return Request(scope)


class TestRequestIdMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert len(response.headers["X-Request-ID"]) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Request-ID": "req-12345"})
        assert response.headers["X-Request-ID"] == "req-12345"


class TestErrorHandling:
    """Unexpected errors produce the standard error body."""

    def test_repository_crash_returns_500(self, fake_repository) -> None:
        from motoclub.api.dependencies import get_repository
        from motoclub.main import app

        fake_repository.list_events.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_repository] = lambda: fake_repository
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/events")

        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "INTERNAL_ERROR"
        assert "boom" not in data["message"]


class TestClientAddress:
    """Tests for client address resolution."""

    def test_first_forwarded_entry(self) -> None:
        request = request_with_headers({"X-Forwarded-For": " 1.1.1.1 , 2.2.2.2"})
        assert client_address(request) == "1.1.1.1"

    def test_real_ip_fallback(self) -> None:
        request = request_with_headers({"X-Real-IP": "3.3.3.3"})
        assert client_address(request) == "3.3.3.3"

    def test_forwarded_takes_precedence(self) -> None:
        request = request_with_headers(
            {"X-Forwarded-For": "1.1.1.1", "X-Real-IP": "3.3.3.3"}
        )
        assert client_address(request) == "1.1.1.1"

    def test_no_headers(self) -> None:
        assert client_address(request_with_headers({})) is None


class TestHealth:
    """Tests for health endpoints."""

    def test_health(self, client: TestClient) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["service"] == "motoclub-api"

    def test_ready(self, client: TestClient) -> None:
        data = client.get("/ready").json()
        assert data["status"] == "ready"
        assert "content_store_configured" in data
