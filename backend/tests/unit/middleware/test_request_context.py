"""
Request Context Middleware Tests.

WHAT: Unit tests for the RequestContextMiddleware.

WHY: Every log line written while serving a request should be traceable
to that request. These tests ensure:
- Request IDs are generated, or reused when the caller sends one
- The ID is echoed in the response headers
- Context is available during the request and cleared afterwards
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from pet_store.middleware.request_context import (
    REQUEST_ID_HEADER,
    RequestContextMiddleware,
    get_request_context,
    get_request_id,
)


def _make_request(headers: dict = None) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
    }
    return Request(scope)


class TestGetRequestId:
    """Tests for the get_request_id function."""

    def test_generates_id_when_missing(self):
        request_id = get_request_id(_make_request())
        assert len(request_id) == 36

    def test_generates_unique_ids(self):
        assert get_request_id(_make_request()) != get_request_id(_make_request())

    def test_reuses_incoming_id(self):
        """
        Test that a caller-supplied ID is kept.

        WHY: Proxies that already tag requests should see the same ID in our logs.
        """
        request = _make_request({REQUEST_ID_HEADER: "  abc-123 "})
        assert get_request_id(request) == "abc-123"

    def test_blank_incoming_id_is_replaced(self):
        request = _make_request({REQUEST_ID_HEADER: "   "})
        assert get_request_id(request).strip() != ""


class TestRequestContextMiddleware:
    """Tests for the middleware itself."""

    @pytest.fixture
    def test_client(self):
        app = FastAPI()
        app.add_middleware(RequestContextMiddleware)

        @app.get("/context")
        async def context_route():
            ctx = get_request_context()
            return {"request_id": ctx.request_id, "path": ctx.path, "method": ctx.method}

        return TestClient(app)

    def test_response_has_request_id_header(self, test_client):
        response = test_client.get("/context")

        assert response.status_code == 200
        assert response.headers[REQUEST_ID_HEADER] == response.json()["request_id"]

    def test_context_available_in_handler(self, test_client):
        response = test_client.get("/context", headers={REQUEST_ID_HEADER: "req-1"})

        assert response.json() == {"request_id": "req-1", "path": "/context", "method": "GET"}
        assert response.headers[REQUEST_ID_HEADER] == "req-1"

    def test_context_cleared_after_request(self, test_client):
        test_client.get("/context")
        assert get_request_context() is None

    def test_request_is_logged(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="pet_store.middleware.request_context"):
            test_client.get("/context", headers={REQUEST_ID_HEADER: "req-2"})

        records = [r for r in caplog.records if getattr(r, "request_id", None) == "req-2"]
        assert len(records) == 1
        assert "GET /context -> 200" in records[0].getMessage()
        assert records[0].status_code == 200
