"""Request and correlation ID middleware (raw ASGI).

Forwards a client-supplied request ID when it is safe to log, otherwise
generates one. The correlation ID is forwarded as-is when present and falls
back to the request ID. Both are stored on scope state and echoed on the
response.
"""

import logging
import re
import uuid
from typing import Callable

logger = logging.getLogger(__name__)

ID_MAX_LENGTH = 64
_SAFE_ID = re.compile(r"^[a-zA-Z0-9_-]{1,%d}$" % ID_MAX_LENGTH)


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _safe_id(raw: str | None) -> str | None:
    if raw and _SAFE_ID.match(raw.strip()):
        return raw.strip()
    return None


def RequestContextMiddleware(
    app: Callable,
    request_id_header: str = "X-Request-ID",
    correlation_id_header: str = "X-Correlation-ID",
) -> Callable:
    """Attach request_id and correlation_id to scope state and response headers."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _safe_id(_get_header(scope, request_id_header)) or str(uuid.uuid4())
        correlation_id = _safe_id(_get_header(scope, correlation_id_header)) or request_id
        state = scope.setdefault("state", {})
        state["request_id"] = request_id
        state["correlation_id"] = correlation_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((request_id_header.encode(), request_id.encode()))
                headers.append((correlation_id_header.encode(), correlation_id.encode()))
                message["headers"] = headers
                logger.debug(
                    "%s %s -> %s [%s]",
                    scope.get("method"),
                    scope.get("path"),
                    message.get("status"),
                    request_id,
                )
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
