"""
Create tables and seed the first admin account.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from app.core.config import settings
from app.crud.user import create_user, get_user_by_account
from app.db.base import Base

# Ensure all models are imported so metadata.create_all can see them
from app.models.product import Product  # noqa: F401
from app.models.user import CartItem, User  # noqa: F401

logger = logging.getLogger(__name__)


async def init_db(engine: AsyncEngine, session_factory: async_sessionmaker) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialised")

    async with session_factory() as session:
        if await get_user_by_account(session, settings.FIRST_ADMIN_ACCOUNT) is None:
            await create_user(
                session,
                account=settings.FIRST_ADMIN_ACCOUNT,
                email=settings.FIRST_ADMIN_EMAIL,
                password=settings.FIRST_ADMIN_PASSWORD,
                role="admin",
            )
            logger.info(
                "Default admin created: %s (password: <redacted>)",
                settings.FIRST_ADMIN_ACCOUNT,
            )
