"""Mapping of copilot errors to HTTP error responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.schemas import ErrorResponse
from src.common.errors import BackendError, ConfigError, InputShapeError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Turn a request validation failure into one readable sentence."""
    errors = exc.errors()
    for error in errors:
        if tuple(error.get("loc", ())) != ("body", "messages"):
            continue
        if error.get("type") in ("list_type", "missing"):
            return "messages must be an array"
        if error.get("type") == "too_short":
            return "messages must not be empty"

    if not errors:
        return "invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())[1:]) or "body"
    return f"{location}: {first.get('msg', 'invalid value')}"


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject malformed request bodies with 400."""
    message = _describe_validation_error(exc)
    logger.info("[api] %s %s rejected: %s", request.method, request.url.path, message)
    return _error_response(400, message)


async def handle_input_shape_error(request: Request, exc: InputShapeError) -> JSONResponse:
    """Reject input that passed schema validation but is still unusable."""
    logger.info("[api] %s %s rejected: %s", request.method, request.url.path, exc)
    return _error_response(400, str(exc))


async def handle_config_error(request: Request, exc: ConfigError) -> JSONResponse:
    """Fail the request when the backend is not configured."""
    logger.error("[api] %s %s: configuration error: %s", request.method, request.url.path, exc)
    return _error_response(500, str(exc))


async def handle_backend_error(request: Request, exc: BackendError) -> JSONResponse:
    """Pass backend failures through unmasked."""
    logger.warning("[api] %s %s: backend error: %s", request.method, request.url.path, exc)
    return _error_response(500, str(exc) or "Unknown error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the copilot error handlers on an app."""
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # pyright: ignore[reportArgumentType]
    app.add_exception_handler(InputShapeError, handle_input_shape_error)  # pyright: ignore[reportArgumentType]
    app.add_exception_handler(ConfigError, handle_config_error)  # pyright: ignore[reportArgumentType]
    app.add_exception_handler(BackendError, handle_backend_error)  # pyright: ignore[reportArgumentType]
