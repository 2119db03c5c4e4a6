"""
Product write path and lookups.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError
from app.crud.base import commit, discard
from app.models.product import Product
from app.schemas.document import validate_document
from app.schemas.product import ProductDocument

logger = logging.getLogger(__name__)


async def save_product(db: AsyncSession, product: Product) -> Product:
    try:
        validate_document(ProductDocument, product)
    except ValidationError as exc:
        discard(db, product)
        logger.info("Rejected write for product %r: %s", product.name, exc)
        raise
    await commit(db, product)
    return product


async def create_product(db: AsyncSession, **fields) -> Product:
    product = Product(**fields)
    await save_product(db, product)
    logger.info("Created product %s (%s)", product.name, product.category)
    return product


async def get_product(db: AsyncSession, product_id: int) -> Product | None:
    result = await db.execute(select(Product).where(Product.id == product_id))
    return result.scalar_one_or_none()
