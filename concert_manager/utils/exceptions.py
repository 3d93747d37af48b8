"""Errors raised by repositories and translated to HTTP responses by the routes.

Both classes derive from ``ValueError`` so any route that only knows about
``ValueError`` still answers with a 400 rather than a 500.
"""
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class NotFoundError(ValueError):
    """The requested row, or a row it references, does not exist."""


class ConflictError(ValueError):
    """The request clashes with existing state (duplicate key, illegal transition)."""


def _format_error(error: dict) -> str:
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
    if location:
        return f"{'.'.join(location)}: {error.get('msg')}"
    return error.get("msg", "Invalid request")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = "; ".join(_format_error(error) for error in exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"detail": message})
