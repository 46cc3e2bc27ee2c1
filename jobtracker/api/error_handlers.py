"""
Global exception handlers.

- AppError -> its own status code and user-safe message
- RequestValidationError -> 400 with a readable summary of the bad fields
- Exception (catch-all) -> 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jobtracker.core.errors import AppError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong, try again later"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_app_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_app_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.info(
            f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        headers = None
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers=headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning(f"Validation error on {request.url.path}: {len(errors)} field(s)")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _summarize_validation_errors(errors)},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. Details go to the log, not the client."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": GENERIC_ERROR_MESSAGE},
        )


def _summarize_validation_errors(errors) -> str:
    parts = []
    for error in errors:
        # Drop the "body"/"path"/"query" prefix from the location
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "path", "query")]
        field = ".".join(loc)
        message = str(error.get("msg", "invalid value")).removeprefix("Value error, ")
        parts.append(f"{field}: {message}" if field else message)
    return ", ".join(parts) or "Invalid request data"
