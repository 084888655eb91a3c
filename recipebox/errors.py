"""Exception handlers that map failures to JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def format_validation_error(exc: RequestValidationError) -> str:
    """Summarize pydantic validation errors as a single readable message."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(messages) or "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Invalid or missing input is a 400, not FastAPI's default 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": format_validation_error(exc)},
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Store failures are logged and reported without detail."""
    logger.exception(f"Database error handling {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def catch_unhandled_exceptions(request: Request, call_next):
    """Anything else is a 500 with no internals leaked.

    Runs as middleware registered before CORSMiddleware, so the 500 still
    passes through CORS on its way out.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception(f"Unhandled error handling {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to the application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.middleware("http")(catch_unhandled_exceptions)
