"""Logfire setup.

Services emit structured events and spans through ``logfire`` directly,
named ``<service>.<operation>``. This module only wires the process and
its frameworks up to it.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from board.config import ObservabilitySettings, Settings

SERVICE_NAME = "board-api"


def _should_send(observability: ObservabilitySettings) -> bool:
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the process-wide Logfire client.

    Must run once, before the app or the engine is instrumented.
    """
    send = _should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            colors="auto",
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


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    # Validation errors arrive in ``attributes``; keep them and add the route
    return {
        **attributes,
        "method": getattr(request, "method", None),
        "path": request.url.path,
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Open a span for every request the app serves."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Open a span for every statement sent through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
