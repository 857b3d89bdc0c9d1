from __future__ import annotations

import uuid
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import Headers, MutableHeaders

from user_api.errors import internal_error_response


def resolve_request_id(headers: Headers, header_name: str) -> str:
    """Reuse the caller's correlation id when it is non-blank, else mint one."""
    existing = headers.get(header_name)
    if existing and existing.strip():
        return existing.strip()
    return str(uuid.uuid4())


class RequestContextMiddleware:
    """Assigns a request id, echoes it on the response and writes access logs."""

    def __init__(self, app: Callable[..., Any], header_name: str = "X-Request-ID") -> None:
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = resolve_request_id(Headers(scope=scope), self.header_name)
        # Exposed to handlers as request.state.request_id.
        scope.setdefault("state", {})["request_id"] = request_id

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=scope.get("path"),
            method=scope.get("method"),
        )

        start = perf_counter()
        status_code: int = 500
        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code, response_started

            if message.get("type") == "http.response.start":
                response_started = True
                status_code = int(message.get("status", 500))
                headers = MutableHeaders(scope=message)
                headers[self.header_name] = request_id

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            structlog.get_logger("errors").exception("unhandled_error")
            if response_started:
                raise
            # Last stop before the transport: anything unanticipated becomes a 500 envelope.
            response = internal_error_response(request_id)
            await response(scope, receive, send_wrapper)
        finally:
            elapsed_ms = (perf_counter() - start) * 1000.0
            structlog.get_logger("access").info(
                "http_request",
                status_code=status_code,
                elapsed_ms=round(elapsed_ms, 2),
            )
            structlog.contextvars.clear_contextvars()
