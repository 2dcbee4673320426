"""Logfire setup for the board API.

Vote and comment flows open their own spans (``vote_service.vote_subject``
and friends); this module only wires Logfire itself and the FastAPI and
SQLAlchemy integrations.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.requests import HTTPConnection

from board.config import Settings

SERVICE_NAME = "board-api"


def _should_send(settings: Settings) -> bool:
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process, migrations and seeding.

    Spans are only shipped when ``OBSERVABILITY__SEND_TO_LOGFIRE`` says so or,
    failing that, when ``OBSERVABILITY__LOGFIRE_TOKEN`` is set. Otherwise they
    are printed to the console.
    """
    send_to_logfire = _should_send(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token or None,
        console=logfire.ConsoleOptions(
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


def _request_attributes(request: HTTPConnection, attributes: dict) -> dict:
    # Only the path and caller; the session cookie never reaches a span.
    return {
        **attributes,
        "path": request.url.path,
        "client_host": request.client.host if request.client else None,
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every board request without capturing headers."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the statements of the board's Postgres engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
