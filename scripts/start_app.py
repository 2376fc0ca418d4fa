#!/usr/bin/env python3
"""Serve the board API with uvicorn."""

import sys

import logfire
import uvicorn

from board.config import Settings
from board.util.logging import setup_logging
from board.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Logfire first so a failing import or bind is still reported
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Starting board API", git_sha=settings.git_sha, port=settings.port)
    try:
        uvicorn.run(
            "board.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Board API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
