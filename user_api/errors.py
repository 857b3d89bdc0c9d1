"""Error signals and the uniform JSON error envelope.

Every failure leaves the service as ``{"error", "message", "requestId"}``.
Validators and the user service hand back ``ApiError`` values instead of
raising them; the HTTP layer translates them here exactly once.
"""

from __future__ import annotations

from typing import TypeVar, Union

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

T = TypeVar("T")

INTERNAL_ERROR_NAME = "InternalServerError"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"
ROUTE_NOT_FOUND_NAME = "NotFound"
ROUTE_NOT_FOUND_MESSAGE = "The requested resource does not exist"

logger = structlog.get_logger("errors")


class ApiError(Exception):
    """A client or server fault carrying an HTTP status and a readable message."""

    status_code: int = 500

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    @property
    def name(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{self.name}(status_code={self.status_code}, message={self.message!r})"


class ClientInputError(ApiError):
    """Malformed identifier or body. The caller can fix the request and retry."""

    def __init__(self, message: str) -> None:
        super().__init__(400, message)


class NotFoundError(ApiError):
    def __init__(self, message: str) -> None:
        super().__init__(404, message)


# Either a value or the error that stopped the pipeline.
Result = Union[T, ApiError]


def error_body(error: str, message: str, request_id: str) -> dict[str, str]:
    return {"error": error, "message": message, "requestId": request_id}


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or "unknown"


def internal_error_response(request_id: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=error_body(INTERNAL_ERROR_NAME, INTERNAL_ERROR_MESSAGE, request_id),
    )


def error_response(request: Request, exc: ApiError) -> JSONResponse:
    request_id = get_request_id(request)
    logger.warning("api_error", error=exc.name, status_code=exc.status_code, message=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.name, exc.message, request_id),
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(request, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    request_id = get_request_id(request)
    if exc.status_code == 404:
        logger.info("route_not_found")
        body = error_body(ROUTE_NOT_FOUND_NAME, ROUTE_NOT_FOUND_MESSAGE, request_id)
    elif exc.status_code == 405:
        body = error_body("MethodNotAllowed", "Method not allowed", request_id)
    else:
        logger.warning("http_error", status_code=exc.status_code, detail=exc.detail)
        body = error_body("HTTPError", str(exc.detail), request_id)
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request bodies that FastAPI could not decode never reach the validators."""
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        return error_response(request, ClientInputError("Malformed JSON body"))
    messages = [str(err.get("msg", "Invalid request")) for err in errors]
    return error_response(request, ClientInputError("; ".join(messages) or "Invalid request"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
