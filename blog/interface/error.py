"""Interface layer error handling.

Maps domain errors to HTTP responses. Not-found outcomes never reach here:
routes turn None/False results into 404 themselves.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from blog.domain.error import DomainError, ValidationError


async def handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    """Respond 400 for invalid input."""
    logfire.warn("Validation error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    """Respond 500 for any other domain failure."""
    logfire.error("Unhandled domain error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on the application."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(DomainError, handle_domain_error)
