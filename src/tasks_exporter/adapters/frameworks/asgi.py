"""ASGI adapter exposing a Prometheus registry.

This adapter provides a framework-agnostic ASGI application that can be used
with any ASGI server (uvicorn, hypercorn, daphne).
"""

import asyncio
import json
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from prometheus_client.registry import CollectorRegistry

logger = logging.getLogger(__name__)

# ASGI type aliases
Scope = dict[str, Any]
Receive = Callable[[], Coroutine[Any, Any, dict[str, Any]]]
Send = Callable[[dict[str, Any]], Coroutine[Any, Any, None]]
ASGIApp = Callable[[Scope, Receive, Send], Coroutine[Any, Any, None]]


async def _send_response(
    send: Send, status: int, content_type: str, body: bytes
) -> None:
    """Send an HTTP response with headers and body.

    Args:
        send: ASGI send callable for writing response.
        status: HTTP status code.
        content_type: Content-Type header value.
        body: Response body.
    """
    headers = [(b"content-type", content_type.encode())]
    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body})


async def _handle_endpoint(
    send: Send,
    endpoint_func: Callable[[], Coroutine[Any, Any, bytes]],
    content_type: str,
    log_message: str,
) -> None:
    """Execute an endpoint function with error handling and send response.

    Args:
        send: ASGI send callable for writing response.
        endpoint_func: Async function that returns the response body.
        content_type: Content-Type header for success response.
        log_message: Message to log on error.
    """
    try:
        body = await endpoint_func()
    except Exception:
        logger.exception(log_message)
        error_body = json.dumps({"error": "Internal Server Error"}).encode()
        await _send_response(send, 500, "application/json", error_body)
        return
    await _send_response(send, 200, content_type, body)


def create_asgi_app(registry: CollectorRegistry) -> ASGIApp:
    """Create an ASGI app with a /metrics endpoint.

    Every request to /metrics runs one collection cycle of each collector
    registered in registry.

    Args:
        registry: Registry rendered in the Prometheus text format.

    Returns:
        ASGI application callable.
    """

    async def render_metrics() -> bytes:
        # Collection blocks on upstream requests.
        return await asyncio.to_thread(generate_latest, registry)

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return

        if scope["path"] == "/metrics":
            await _handle_endpoint(
                send,
                render_metrics,
                CONTENT_TYPE_LATEST,
                "Error collecting metrics",
            )
        else:
            await _send_response(send, 404, "text/plain", b"Not Found")

    return app
