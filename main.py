"""
Macha - Main Entry Point

Runs the campaign dashboard API with uvicorn.
"""

import structlog
import uvicorn

from macha.config import get_settings
from macha.core.logging import configure_logging

logger = structlog.get_logger(__name__)


def main():
    """Main entry point for running the application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info(
        "Starting server",
        host=settings.api_host,
        port=settings.api_port,
        environment=settings.app_env,
    )

    uvicorn.run(
        "macha.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
