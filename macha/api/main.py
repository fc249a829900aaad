"""Macha API - Main FastAPI Application.

Serves the normalized Notion data consumed by the dashboard:

- /api/campaigns - Campaigns matching the configured campaign title
- /api/mentions - Instagram mentions, optionally per campaign
- /api/seeding - Campaign participants derived from mentions
- /api/content - Static dashboard content
- /health/live - Liveness probe

Usage:
    # Run with uvicorn
    uvicorn macha.api.main:app --reload

    # Or run directly
    python -m macha.api.main
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import JSONResponse

from macha import __version__
from macha.api.dependencies import reset_dependencies
from macha.api.middleware import CORS_HEADERS, OpenCORSMiddleware
from macha.api.models import ErrorResponse
from macha.api.routes import (
    campaigns_router,
    content_router,
    health_router,
    mentions_router,
    seeding_router,
)
from macha.config.settings import get_settings
from macha.core.exceptions import RecordSourceError
from macha.core.logging import configure_logging

logger = structlog.get_logger(__name__)

API_TITLE = "Macha Dashboard API"
UNEXPECTED_ERROR_MESSAGE = "서버에서 예상치 못한 오류가 발생했습니다."
API_DESCRIPTION = """
## Campaign analytics backed by Notion

Reads campaign and Instagram mention records from Notion databases and
returns them as flat, typed records with defaults for every missing field.
Read-only: nothing is written back to Notion.
"""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Startup: Configure logging
    - Shutdown: Close the shared Notion client
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("application_started", environment=settings.app_env, version=__version__)

    yield

    logger.info("application_stopping")
    await reset_dependencies()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    app.add_middleware(OpenCORSMiddleware)

    @app.exception_handler(RecordSourceError)
    async def record_source_exception_handler(
        request: Request, exc: RecordSourceError
    ) -> JSONResponse:
        """Turn a failed resource load into a 500 with the localized message."""
        logger.error(
            "record_source_error",
            path=request.url.path,
            resource=exc.resource,
            error=exc.cause,
        )
        response = ErrorResponse(error=exc.message, details=exc.cause)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=response.model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions.

        This handler runs outside OpenCORSMiddleware, so the CORS headers
        are attached here.
        """
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        response = ErrorResponse(error=UNEXPECTED_ERROR_MESSAGE, details=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=response.model_dump(mode="json"),
            headers=CORS_HEADERS,
        )

    app.include_router(health_router)

    api_router = APIRouter(prefix="/api")
    api_router.include_router(campaigns_router)
    api_router.include_router(mentions_router)
    api_router.include_router(seeding_router)
    api_router.include_router(content_router)
    app.include_router(api_router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "macha.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
