"""
User write path and lookups.

Every change to a user goes through :func:`save_user`, which validates the
document, prepares credentials for the fields that changed and commits.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.credentials import prepare_credentials
from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.core.security import verify_password
from app.crud.base import commit, discard
from app.db.changes import changed_fields
from app.models.product import Product
from app.models.user import CartItem, User
from app.schemas.document import validate_document
from app.schemas.user import UserDocument

logger = logging.getLogger(__name__)

CREDENTIAL_FIELDS = ("password", "tokens")


async def save_user(db: AsyncSession, user: User) -> User:
    """Validate, prepare credentials and commit *user*.

    On :class:`ValidationError` or :class:`ConflictError` nothing is
    written and the record is detached from the session with its candidate
    values intact, including a new plaintext password, so it can be
    corrected and saved again.
    """
    changes = changed_fields(user, CREDENTIAL_FIELDS)
    plain = user.password if "password" in changes else None
    try:
        validate_document(UserDocument, user)
        prepare_credentials(user, changes)
    except ValidationError as exc:
        discard(db, user)
        logger.info("Rejected write for account %s: %s", user.account, exc)
        raise
    try:
        await commit(db, user)
    except ConflictError:
        discard(db, user)
        if plain is not None:
            user.password = plain
        raise
    return user


async def create_user(
    db: AsyncSession,
    *,
    account: str,
    email: str,
    password: str,
    role: str = "user",
) -> User:
    user = User(account=account, email=email, password=password, role=role)
    await save_user(db, user)
    logger.info("Created user %s (role %s)", user.account, user.role)
    return user


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_account(db: AsyncSession, account: str) -> User | None:
    result = await db.execute(select(User).where(User.account == account.strip()))
    return result.scalar_one_or_none()


def verify_user_password(user: User, plain: str) -> bool:
    """Compare *plain* against the stored hash."""
    return verify_password(plain, user.password)


# ── Tokens ──────────────────────────────────────────────────────────
async def add_token(db: AsyncSession, user: User, token: str) -> User:
    """Append *token*; the oldest ones are evicted past the limit."""
    user.tokens = [*(user.tokens or []), token]
    return await save_user(db, user)


async def remove_token(db: AsyncSession, user: User, token: str) -> User:
    user.tokens = [t for t in (user.tokens or []) if t != token]
    return await save_user(db, user)


# ── Cart ────────────────────────────────────────────────────────────
async def set_cart_item(
    db: AsyncSession, user: User, product_id: int, quantity: int
) -> User:
    """Set the quantity of *product_id* in the cart; 0 removes the line."""
    product = await db.get(Product, product_id)
    if product is None:
        raise NotFoundError(f"Product {product_id} not found")

    line = next((item for item in user.cart if item.product_id == product_id), None)
    if quantity == 0:
        if line is not None:
            user.cart.remove(line)
    elif line is not None:
        line.quantity = quantity
    else:
        user.cart.append(CartItem(product_id=product_id, quantity=quantity))

    return await save_user(db, user)
