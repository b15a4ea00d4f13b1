"""FastAPI application factory.

Run with ``uvicorn learnhub.interface.api.app:create_app --factory``.
Logfire must already be configured (scripts/start_app.py in production,
tests/conftest.py in tests).
"""

from dishka import AsyncContainer
from fastapi import FastAPI

from learnhub.interface.api.routes import comments, health, posts, reactions, reports
from learnhub.util.di.container import create_container, setup_di
from learnhub.util.observability import SERVICE_VERSION, instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the LearnHub API.

    Args:
        container: DI container serving the requests; the production
            container is built when omitted
    """
    app = FastAPI(
        title="LearnHub API",
        description=(
            "Posts, threaded discussions, likes, bookmarks and moderation for students"
        ),
        version=SERVICE_VERSION,
    )
    instrument_fastapi(app)
    setup_di(app, container or create_container())

    for module in (health, posts, comments, reactions, reports):
        app.include_router(module.router)

    return app
