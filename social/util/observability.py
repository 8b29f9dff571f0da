"""Logfire setup.

Domain services emit spans and events directly:

    with logfire.span("social_graph.like", requester_id=str(requester_id)):
        ...
        logfire.info("Profile liked", target_id=str(target_id))

Passwords and token strings are never attached to spans or events.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from social.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Telemetry leaves the process only when OBSERVABILITY__SEND_TO_LOGFIRE is
    true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present.
    Console output is always on.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = observability.logfire_token is not None

    logfire.configure(
        service_name="social-backend",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request of the app.

    Headers stay out of the spans since they carry bearer tokens, and
    health probes are not traced.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, capture_headers=False, excluded_urls="/health")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
