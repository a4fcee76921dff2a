"""Logfire setup.

Services log and trace through logfire directly, e.g.
``with logfire.span("thread_service.paginate_threads", limit=limit)``.
This module only configures the SDK and instruments the web and
database layers.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from discuss.config import ObservabilitySettings, Settings


def _should_send(observability: ObservabilitySettings) -> bool:
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app is imported."""
    observability = settings.observability
    send = _should_send(observability)

    logfire.configure(
        service_name="discuss-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    # Headers stay out of traces: they carry the auth_token cookie
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued through the engine.

    Each candidate thread costs one recursive query, so slow pages show
    up as long runs of these spans.
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
