"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from photobooth_admin.api.admin import router as admin_router
from photobooth_admin.app_logging import configure_logging
from photobooth_admin.containers import AppContainer
from photobooth_admin.errors import (
    NotFoundError,
    PhotoBoothError,
    StorageError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[PhotoBoothError], int, str]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST, "Invalid request"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "Not found"),
    (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR, "Storage failure"),
]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Photo Booth Admin")
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(PhotoBoothError)
    async def handle_photo_error(
        request: Request, exc: PhotoBoothError
    ) -> JSONResponse:
        status_code, error = _classify(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "%s %s failed: %s",
                request.method,
                request.url.path,
                exc,
                exc_info=exc.__cause__ or exc,
            )
        return _error_response(status_code, error, str(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(
            status.HTTP_400_BAD_REQUEST, "Invalid request", _describe(exc)
        )

    return app


def _classify(exc: PhotoBoothError) -> tuple[int, str]:
    for error_type, status_code, label in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code, label
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error"


def _describe(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(messages) or "Invalid request"


def _error_response(status_code: int, error: str, details: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "details": details},
    )
