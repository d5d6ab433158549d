#!/usr/bin/env python3
"""Check that the configured database answers a ping."""

import asyncio
import sys

import logfire

from stockboard.config import Settings
from stockboard.persistence.database import create_engine, ping
from stockboard.util.logging import setup_logging
from stockboard.util.observability import configure_logfire


async def check(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await ping(engine)
    finally:
        await engine.dispose()


def main() -> int:
    """Ping the database; exit non-zero when it is unreachable."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        asyncio.run(check(settings))
    except Exception as e:
        logfire.error(
            "Database ping failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return 1

    logfire.info("Database ping OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
