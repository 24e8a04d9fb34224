"""
Error taxonomy for the URL shortener and the FastAPI handlers that render it.

- ValidationError: malformed long URL or short identifier (400)
- NotFoundError: short identifier has no matching record (404)
- StoreError: durable store unreachable or write failed (500)
- CacheError: cache unreachable, never leaves the pipelines

Public messages are generic; full details are only logged server-side.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "An unexpected error occurred."


class ShortenerError(Exception):
    """Base class for errors raised by the shortener core."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message: str = GENERIC_SERVER_ERROR

    def __init__(self, message: str = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message

    @property
    def public_detail(self) -> str:
        """Message safe to send to the client."""
        return GENERIC_SERVER_ERROR


class ValidationError(ShortenerError):
    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "Invalid request"

    @property
    def public_detail(self) -> str:
        return self.message


class NotFoundError(ShortenerError):
    status_code = status.HTTP_404_NOT_FOUND
    public_message = "Short URL not found"

    @property
    def public_detail(self) -> str:
        return self.public_message


class StoreError(ShortenerError):
    """Durable store failure. The message is internal and never returned."""


class CacheError(ShortenerError):
    """Cache transport failure. Pipelines treat it as a miss."""


async def shortener_error_handler(request: Request, exc: ShortenerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s on %s %s: %s",
            type(exc).__name__, request.method, request.url.path, exc.message,
            exc_info=exc,
        )
    else:
        logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_detail})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_SERVER_ERROR},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShortenerError, shortener_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
