"""Shared test fixtures for all test modules."""

import logging
from collections.abc import Callable

import httpx
import pytest

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def test_logger() -> logging.Logger:
    """Logger propagating to the root logger so caplog sees its records."""
    return logging.getLogger("tasks_exporter.tests")


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    """List collecting every request sent through mock_client."""
    return []


@pytest.fixture
def mock_client(requests_seen: list[httpx.Request]):
    """Factory fixture creating an httpx.Client backed by MockTransport.

    Usage:
        def test_something(mock_client):
            client = mock_client(lambda request: httpx.Response(200, content=b"{}"))
    """
    clients: list[httpx.Client] = []

    def _client(handler: Handler) -> httpx.Client:
        def _recording(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_recording))
        clients.append(client)
        return client

    yield _client

    for client in clients:
        client.close()


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Usage:
        async def test_something(asgi_test_client):
            app = create_asgi_app(registry)
            async with asgi_test_client(app) as client:
                response = await client.get("/metrics")
    """

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
