"""Error Handlers — global exception handlers sharing the {"error": message} envelope.

Invariants:
    - ClassifiedError -> mapped status (transport.status_for) + its message
    - Starlette HTTPException (unknown route, wrong method) -> its status + detail
    - RequestValidationError -> 400 "invalid request body"
    - Exception (catch-all) -> 500 "internal error", never leaks internal details

Design Decisions:
    - Four-layer handler: domain, routing, validation, catch-all
    - Status mapping reused from transport: one table for pipeline and handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from model_api.api.transport import (
    INTERNAL_ERROR_MESSAGE,
    JSONUTF8Response,
    encode_error,
)
from model_api.core.errors import ClassifiedError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_classified_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_classified_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ClassifiedError)
    async def classified_error_handler(request: Request, exc: ClassifiedError):
        """Handle classified errors raised outside the endpoint pipeline."""
        logger.error(
            f"ClassifiedError: {exc.message}",
            extra={
                "error_key": str(getattr(exc.key, "value", exc.key)),
                "path": request.url.path,
            },
        )
        return encode_error(exc)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONUTF8Response(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONUTF8Response(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "invalid request body"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONUTF8Response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
