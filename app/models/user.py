"""
User model — shop accounts with their credentials, tokens and cart.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship, validates

from app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    account: str = Column(String(20), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    email: str = Column(String(320), unique=True, nullable=False, index=True)  # type: ignore[assignment]
    # bcrypt hash once written; plaintext only while the record is in flight
    password: str = Column(String(128), nullable=False)  # type: ignore[assignment]
    role: str = Column(  # type: ignore[assignment]
        String(10),
        nullable=False,
        default="user",
        server_default="user",
    )  # user | admin
    # MutableList so in-place appends show up in attribute history
    tokens: list[str] = Column(MutableList.as_mutable(JSON), nullable=False, default=list)  # type: ignore[assignment]
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    cart = relationship(
        "CartItem",
        order_by="CartItem.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("role", "user")
        kwargs.setdefault("tokens", [])
        super().__init__(**kwargs)

    @validates("account", "email")
    def _strip(self, _key: str, value: str | None) -> str | None:
        return value.strip() if isinstance(value, str) else value

    @property
    def cart_total(self) -> int:
        """Total quantity across the cart's line items. Never stored."""
        return sum(item.quantity for item in self.cart)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, account={self.account!r}, role={self.role})>"


class CartItem(Base):
    __tablename__ = "cart_items"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    user_id: int = Column(  # type: ignore[assignment]
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Plain id, not a foreign key: deleting a product leaves carts alone
    product_id: int = Column(Integer, nullable=False, index=True)  # type: ignore[assignment]
    quantity: int = Column(Integer, nullable=False)  # type: ignore[assignment]
    position: int = Column(Integer, nullable=False)  # type: ignore[assignment]
