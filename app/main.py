"""
Storefront — database bootstrap entry point.

Run with ``python -m app.main`` to create the schema and seed the admin
account. The document logic lives in the `core/`, `crud/`, `models/` and
`schemas/` packages.
"""

from __future__ import annotations

import asyncio
import logging

from app.core.config import settings
from app.db.init_db import init_db
from app.db.session import async_session_factory, engine

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


async def _run() -> None:
    try:
        await init_db(engine, async_session_factory)
        logger.info("🚀 %s v%s ready", settings.PROJECT_NAME, settings.VERSION)
    finally:
        await engine.dispose()
        logger.info("Shutdown complete")


def main() -> None:
    configure_logging()
    asyncio.run(_run())


if __name__ == "__main__":
    main()
