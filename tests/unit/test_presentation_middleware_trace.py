"""Unit tests for TraceMiddleware (request tracing).

Tests cover:
- Trace ID generation for new requests
- Trace ID reuse from the X-Trace-Id header
- Contextvar and structlog context propagation during the request
- Context cleared after the request (also on exceptions)

Architecture:
- Unit tests with mocked Starlette Request/Response
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import structlog

from src.presentation.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)


def _mock_request(headers: dict[str, str] | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = headers or {}
    return request


def _mock_response() -> MagicMock:
    response = MagicMock()
    response.headers = {}
    return response


@pytest.mark.unit
class TestTraceMiddlewareTraceId:
    """Test trace ID selection."""

    async def test_generates_new_trace_id_when_missing(self):
        """Test middleware generates a UUID trace ID when none is sent."""
        middleware = TraceMiddleware(app=MagicMock())
        call_next = AsyncMock(return_value=_mock_response())

        response = await middleware.dispatch(_mock_request(), call_next)

        UUID(response.headers["X-Trace-Id"])
        call_next.assert_awaited_once()

    async def test_uses_existing_trace_id_from_header(self):
        """Test middleware reuses the caller's trace ID."""
        existing = "12345678-1234-5678-1234-567812345678"
        middleware = TraceMiddleware(app=MagicMock())

        response = await middleware.dispatch(
            _mock_request({"X-Trace-Id": existing}),
            AsyncMock(return_value=_mock_response()),
        )

        assert response.headers["X-Trace-Id"] == existing


@pytest.mark.unit
class TestTraceMiddlewareContext:
    """Test context propagation."""

    async def test_trace_id_available_during_request(self):
        """Test get_trace_id() and structlog context carry the request trace ID."""
        # Arrange
        middleware = TraceMiddleware(app=MagicMock())
        seen = {}

        async def capture(request):
            seen["trace_id"] = get_trace_id()
            seen["structlog"] = structlog.contextvars.get_contextvars().get("trace_id")
            return _mock_response()

        # Act
        response = await middleware.dispatch(_mock_request(), capture)

        # Assert
        assert seen["trace_id"] == response.headers["X-Trace-Id"]
        assert seen["structlog"] == seen["trace_id"]

    async def test_context_cleared_after_request(self):
        """Test no trace ID leaks out of the request."""
        middleware = TraceMiddleware(app=MagicMock())

        await middleware.dispatch(
            _mock_request(), AsyncMock(return_value=_mock_response())
        )

        assert get_trace_id() is None
        assert "trace_id" not in structlog.contextvars.get_contextvars()

    async def test_context_cleared_when_handler_raises(self):
        """Test exceptions propagate and the context is still reset."""
        middleware = TraceMiddleware(app=MagicMock())

        with pytest.raises(ValueError):
            await middleware.dispatch(
                _mock_request(), AsyncMock(side_effect=ValueError("boom"))
            )

        assert get_trace_id() is None

    def test_get_trace_id_outside_request(self):
        """Test get_trace_id() is None without an active request."""
        assert get_trace_id() is None
