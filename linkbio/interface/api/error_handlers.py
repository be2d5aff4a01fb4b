"""Mapping of domain errors to HTTP responses.

Error bodies have the shape ``{"detail": "...", "error": "<ErrorClassName>"}``.
Malformed request bodies are left to FastAPI's own 422 handling.

Client errors are handled next to the routes. Everything else, including
``ConsistencyFault``, is handled by the outermost server error handler,
which runs after the DI request scope has exited, so the request
transaction has already been rolled back when the 500 is sent.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from linkbio.domain.error import (
    ConflictError,
    ConsistencyFault,
    DomainError,
    NotFoundError,
    ValidationError,
)

CLIENT_ERROR_STATUS: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
}


def status_for(exc: Exception) -> int:
    """HTTP status for an error; anything but a client error is a 500."""
    for error_type, status_code in CLIENT_ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(exc: Exception) -> dict[str, str]:
    return {"detail": str(exc), "error": type(exc).__name__}


async def client_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate a client-caused domain error into a 4xx response."""
    return JSONResponse(status_code=status_for(exc), content=error_body(exc))


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log and report an unexpected failure as a 500."""
    if isinstance(exc, ConsistencyFault):
        # Operators search for this message to repair one-sided connections
        logfire.error(
            "Consistency fault",
            method=request.method,
            path=request.url.path,
            error=str(exc),
        )
        content = error_body(exc)
    else:
        logfire.error(
            "Unhandled error",
            method=request.method,
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        content = {"detail": "Internal server error", "error": type(exc).__name__}

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register error handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    for error_type in CLIENT_ERROR_STATUS:
        app.add_exception_handler(error_type, client_error_handler)

    # Handlers for Exception are installed outermost by Starlette
    app.add_exception_handler(Exception, server_error_handler)
