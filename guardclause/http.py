"""FastAPI boundary for guard failures.

A `ParameterError` that escapes a request handler is a caller defect; these
handlers report it as a 422 with a stable JSON body instead of a 500.
"""
from __future__ import annotations

import math
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from guardclause.config import Settings
from guardclause.errors import FailureKind, ParameterError
from guardclause.logging import get_logger
from guardclause.models import ErrorCode, ErrorResponse
from guardclause.types import LoggerProtocol

ParameterHandler = Callable[[Request, Exception], Awaitable[JSONResponse]]

_logger: LoggerProtocol = get_logger(__name__)


def _json_safe(value: object | None) -> object:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    return str(value)


def _code_for(kind: FailureKind) -> ErrorCode:
    if kind == "null-argument":
        return "NULL_ARGUMENT"
    if kind == "out-of-range":
        return "OUT_OF_RANGE"
    return "INVALID_ARGUMENT"


def build_error_response(exc: ParameterError, *, expose_values: bool) -> ErrorResponse:
    details: dict[str, object] = {
        "parameter": exc.parameter_name,
        "kind": exc.kind,
    }
    if expose_values and exc.kind == "out-of-range":
        details["value"] = _json_safe(exc.value)
    return ErrorResponse(
        error=exc.message,
        code=_code_for(exc.kind),
        details=details,
        timestamp=datetime.now(timezone.utc),
    )


def make_parameter_exception_handler(settings: Settings) -> ParameterHandler:
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        if not isinstance(exc, ParameterError):
            raise exc
        _logger.warning(
            "parameter check failed: %s",
            exc,
            extra={
                "parameter_name": exc.parameter_name,
                "failure_kind": exc.kind,
                "path": str(request.url.path),
            },
        )
        payload = build_error_response(exc, expose_values=settings.expose_values)
        return JSONResponse(status_code=422, content=payload.model_dump(mode="json"))

    return handler


# Environment-independent default; values stay hidden. Use
# `install_exception_handlers` to apply `GUARDCLAUSE_*` settings, read once.
parameter_exception_handler: ParameterHandler = make_parameter_exception_handler(
    Settings(log_level="INFO", expose_values=False)
)


def install_exception_handlers(app: FastAPI, settings: Settings | None = None) -> None:
    resolved = settings if settings is not None else Settings.from_env()
    get_logger("guardclause").setLevel(resolved.log_level)
    app.add_exception_handler(
        ParameterError, make_parameter_exception_handler(resolved)
    )
