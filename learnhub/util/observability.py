"""Logfire setup and instrumentation.

Domain services, use cases and repositories call logfire directly:

    with logfire.span("thread_service.get_replies", parent_id=parent_id):
        logfire.info("Replies retrieved", count=len(page.data))

This module only decides where telemetry goes and hooks FastAPI and
SQLAlchemy into it.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from learnhub.config import Settings

SERVICE_NAME = "learnhub-api"
SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    # An explicit flag wins; otherwise a token means "send"
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship telemetry to Logfire; without a
    token spans are only printed to the console. OBSERVABILITY__SEND_TO_LOGFIRE
    overrides the choice either way.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request served by ``app``.

    Identity headers are not captured; only method and path are added to
    the request span.
    """

    def _request_attributes(request, attributes):
        return {
            **attributes,
            "method": getattr(request, "method", None),
            "path": request.url.path,
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement, keyset page reads included."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
