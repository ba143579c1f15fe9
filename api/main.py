"""FastAPI application factory and main entrypoint.

The API is read-only: it serves verdicts, JSON-LD and crawler files computed
from the site configuration named by ``SITE_CONFIG_PATH``.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from api.config import get_settings
from api.exceptions import PageGateError
from api.logging import setup_logging
from pagegate import __version__

setup_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    logger.info(
        "api_starting",
        env=settings.env,
        site_config_path=str(settings.site_config_path),
        evaluation_workers=settings.evaluation_workers,
        version=__version__,
    )
    yield
    logger.info("api_stopped")


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
    field: str | None = None,
) -> ORJSONResponse:
    """Render the ``{"error": {...}}`` envelope used by every failing route."""
    error: dict[str, Any] = {"code": code, "message": message}
    if field:
        error["field"] = field
    if details:
        error["details"] = details
    return ORJSONResponse(status_code=status_code, content={"error": error})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="PageGate",
        description="Content-sufficiency verdicts and structured metadata for local-business pages",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    # Rendering layers fetch verdicts from the browser during preview builds
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    from api.routers import health, seo, v1

    app.include_router(health.router)
    app.include_router(seo.router)
    app.include_router(v1.router, prefix="/v1")

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Map application, validation and unexpected errors onto the envelope."""

    @app.exception_handler(PageGateError)
    async def pagegate_error_handler(request: Request, exc: PageGateError) -> ORJSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log("application_error", error_code=exc.code, message=exc.message, path=request.url.path)
        return error_response(exc.status_code, exc.code, exc.message, details=exc.details)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> ORJSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        # Drop the leading "query"/"body" segment
        field = ".".join(str(loc) for loc in first.get("loc", ())[1:])

        logger.warning("request_validation_error", path=request.url.path, field=field)
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "validation_error",
            first.get("msg", "Validation error"),
            field=field or None,
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
        logger.error(
            "unhandled_exception",
            exc_info=exc,
            path=request.url.path,
            method=request.method,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            "An unexpected error occurred",
        )


app = create_app()
