"""
Commit / discard helpers shared by the document write paths.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError

logger = logging.getLogger(__name__)


async def commit(db: AsyncSession, record: object) -> None:
    """Persist *record*, turning unique-key violations into ConflictError."""
    db.add(record)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.error("Database integrity error: %s", exc, exc_info=True)
        raise ConflictError("A record with the same unique value already exists") from exc
    await db.refresh(record)


def discard(db: AsyncSession, record: object) -> None:
    """Detach a rejected record so a later flush cannot write it."""
    if record in db:
        db.expunge(record)
