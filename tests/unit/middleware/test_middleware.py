"""Unit tests for middleware."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import MAX_REQUEST_ID_LENGTH, RequestIDMiddleware


def _create_app_with_middleware() -> FastAPI:
    """Create a minimal FastAPI app with logging and request ID middleware."""
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/test")
    async def _():
        return {"ok": True}

    @app.get("/boom")
    async def _boom():
        raise RuntimeError("boom")

    return app


async def _get(app: FastAPI, url: str, **kwargs):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(url, **kwargs)


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    @pytest.mark.asyncio
    async def test_generates_request_id_when_not_provided(self):
        response = await _get(_create_app_with_middleware(), "/test")

        assert len(response.headers["x-request-id"]) > 0

    @pytest.mark.asyncio
    async def test_propagates_existing_request_id(self):
        response = await _get(
            _create_app_with_middleware(), "/test", headers={"X-Request-ID": "custom-req-123"}
        )

        assert response.headers["x-request-id"] == "custom-req-123"

    @pytest.mark.asyncio
    async def test_replaces_oversized_request_id(self):
        oversized = "x" * (MAX_REQUEST_ID_LENGTH + 1)

        response = await _get(
            _create_app_with_middleware(), "/test", headers={"X-Request-ID": oversized}
        )

        assert response.headers["x-request-id"] != oversized

    @pytest.mark.asyncio
    async def test_generated_ids_differ(self):
        app = _create_app_with_middleware()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            r1 = await c.get("/test")
            r2 = await c.get("/test")

        assert r1.headers["x-request-id"] != r2.headers["x-request-id"]


class TestRequestLoggingMiddleware:
    """Tests for RequestLoggingMiddleware."""

    @pytest.mark.asyncio
    async def test_passes_response_through(self):
        response = await _get(_create_app_with_middleware(), "/test")

        assert response.status_code == 200
        assert response.json() == {"ok": True}

    @pytest.mark.asyncio
    async def test_reraises_handler_errors(self):
        with pytest.raises(RuntimeError, match="boom"):
            await _get(_create_app_with_middleware(), "/boom")
