"""Routing of standard library logging.

Our own code logs through ``logfire``; uvicorn, SQLAlchemy and asyncpg
use the ``logging`` module. Their records are forwarded to Logfire so
both end up in the same stream.
"""

import logging

import logfire

from board.config import Settings

_QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Forward stdlib log records to Logfire.

    SQL echo is driven by ``settings.debug`` through the engine, so the
    SQLAlchemy logger stays at WARNING here whatever the level.
    """
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=level, handlers=[logfire.LogfireLoggingHandler()], force=True)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
