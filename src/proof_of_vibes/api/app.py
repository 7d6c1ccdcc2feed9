"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from proof_of_vibes.api.admin import router as admin_router
from proof_of_vibes.api.collectibles import router as collectibles_router
from proof_of_vibes.api.photos import router as photos_router
from proof_of_vibes.app_logging import configure_logging
from proof_of_vibes.config import parse_allowed_origins
from proof_of_vibes.containers import AppContainer
from proof_of_vibes.domain.errors import (
    ConflictError,
    FieldError,
    NotFoundError,
    ValidationError,
)

_REQUEST_LOCATIONS = {"body", "query", "path", "header"}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title=f"{container.settings.event_name} collectibles")
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(collectibles_router)
    app.include_router(photos_router)
    app.include_router(admin_router)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message, exc.errors)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            FieldError(field=_field_name(error.get("loc", ())), message=error["msg"])
            for error in exc.errors()
        ]
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", errors)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
        return _error_response(status.HTTP_409_CONFLICT, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error",
            extra={"path": request.url.path, "method": request.method},
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _error_response(
    status_code: int, message: str, errors: list[FieldError] | None = None
) -> JSONResponse:
    content: dict[str, object] = {"message": message}
    if errors:
        content["errors"] = [
            {"field": error.field, "message": error.message} for error in errors
        ]
    return JSONResponse(status_code=status_code, content=content)


def _field_name(loc: tuple[object, ...] | list[object]) -> str:
    """Turn a pydantic error location into a dotted field path."""
    parts = list(loc)
    if parts and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(str(part) for part in parts) or "request"
