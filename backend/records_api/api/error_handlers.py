"""Error Handlers — global exception handlers for the Records API.

Invariants:
    - RecordsError → its http_status with {"message": ...}
    - RequestValidationError → 400 with {"message": ...}
    - Exception (catch-all) → 500, never leaks internal details
    - The raising location (file:line) is logged, never returned

Design Decisions:
    - Three-layer handler: domain (RecordsError), validation (Pydantic), catch-all (Exception)
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from records_api.core.errors import RecordsError, StoreError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_records_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def error_origin(exc: BaseException) -> str | None:
    """file:line of the innermost frame that raised exc."""
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return None
    return f"{frames[-1].filename}:{frames[-1].lineno}"


def _register_records_error_handler(app: FastAPI) -> None:
    """Register Records API domain/store error handler."""

    @app.exception_handler(RecordsError)
    async def records_error_handler(request: Request, exc: RecordsError):
        """Handle all Records API errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__}: {exc}",
            extra={
                "error_code": exc.code,
                "error_kind": exc.kind.value if isinstance(exc, StoreError) else None,
                "path": request.url.path,
                "origin": error_origin(exc),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"path": request.url.path, "origin": error_origin(exc)},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "internal server error"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    parts = [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
    return {"message": "; ".join(parts) or "invalid request"}
