"""
Product model — catalogue entries that cart line items point at.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.orm import validates

from app.db.base import Base

CATEGORIES = (
    "books",
    "clothing",
    "home",
    "beauty",
    "food",
    "electronics",
    "toys",
    "appliances",
    "other",
)


class Product(Base):
    __tablename__ = "products"

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    name: str = Column(String(100), nullable=False)  # type: ignore[assignment]
    price: float = Column(Float, nullable=False)  # type: ignore[assignment]
    description: str | None = Column(String(500), nullable=True)  # type: ignore[assignment]
    category: str = Column(String(20), nullable=False)  # type: ignore[assignment]
    sell: bool = Column(Boolean, nullable=False, default=True, server_default="true")  # type: ignore[assignment]
    image: str = Column(String(500), nullable=False)  # type: ignore[assignment]
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("sell", True)
        super().__init__(**kwargs)

    @validates("name", "description")
    def _strip(self, _key: str, value: str | None) -> str | None:
        return value.strip() if isinstance(value, str) else value

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name!r}, category={self.category})>"
