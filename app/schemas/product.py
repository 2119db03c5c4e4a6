"""Pydantic schemas for Product documents."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.models.product import CATEGORIES


class ProductDocument(BaseModel):
    """Field rules checked before a product is written."""

    name: str = Field(min_length=1, max_length=100)
    price: float = Field(ge=0)
    description: str | None = Field(default=None, max_length=500)
    category: str
    sell: bool
    image: str = Field(min_length=1)

    model_config = {"from_attributes": True}

    @field_validator("category")
    @classmethod
    def _validate_category(cls, v: str) -> str:
        if v not in CATEGORIES:
            raise ValueError(f"Category must be one of: {', '.join(CATEGORIES)}")
        return v


class ProductRead(BaseModel):
    id: int
    name: str
    price: float
    description: str | None
    category: str
    sell: bool
    image: str
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}
