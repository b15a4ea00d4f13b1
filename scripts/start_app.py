#!/usr/bin/env python3
"""Serve the LearnHub API with uvicorn.

Logfire is configured before the app factory runs, so failures while
building the container or the routes are reported too.
"""

import sys

import logfire
import uvicorn

from learnhub.config import Settings
from learnhub.util.logging import setup_logging
from learnhub.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting LearnHub API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "learnhub.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=settings.environment == "development",
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
