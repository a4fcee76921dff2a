#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logfire is configured before the app module is imported so failures
during import and startup are reported too.
"""

import sys

import logfire
import uvicorn

from discuss.config import Settings
from discuss.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    logfire.info("Starting API", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            "discuss.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
