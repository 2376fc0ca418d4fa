#!/usr/bin/env python3
"""Upgrade the board schema to the latest alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from board.config import Settings
from board.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception:
            # The deploy must stop here rather than serve a stale schema
            logfire.exception("Schema upgrade failed")
            raise

    logfire.info("Schema is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
