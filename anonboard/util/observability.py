"""Logfire setup for the API process and migration runner.

Application code logs and traces through logfire directly:

    logfire.info("Post reposted", post_id=str(post.id))

    with logfire.span("reaction_service.react", post_id=str(post_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from anonboard.config import ObservabilitySettings, Settings

SERVICE_NAME = "anonboard-api"
SERVICE_VERSION = "0.1.0"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise data is sent
    only when a token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Without a token everything stays on the console, which is what
    development and tests want.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = should_send_to_logfire(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
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


def _request_attributes(request, attributes: dict) -> dict:
    # Caller identity travels in headers and is never copied onto spans
    return {
        **attributes,
        "method": getattr(request, "method", None),
        "path": request.url.path,
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the board API.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, including the counter UPDATEs.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
