"""Pydantic schemas for User documents."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator

MIN_QUANTITY = 1
MAX_QUANTITY = 100


class CartItemDocument(BaseModel):
    product_id: int
    quantity: int = Field(ge=MIN_QUANTITY, le=MAX_QUANTITY)

    model_config = {"from_attributes": True}


class UserDocument(BaseModel):
    """Field rules checked before a user is written.

    ``password`` is only required here; its length is checked by the
    credential step because a stored hash is longer than any plaintext.
    """

    account: str = Field(min_length=4, max_length=20)
    email: EmailStr
    password: str = Field(min_length=1)
    role: Literal["user", "admin"]
    tokens: list[str]
    cart: list[CartItemDocument]

    model_config = {"from_attributes": True}

    @field_validator("account")
    @classmethod
    def _alphanumeric(cls, v: str) -> str:
        if not (v.isascii() and v.isalnum()):
            raise ValueError("Account may only contain letters and digits")
        return v


class CartItemRead(BaseModel):
    product_id: int
    quantity: int

    model_config = {"from_attributes": True}


class UserRead(BaseModel):
    id: int
    account: str
    email: str
    role: str
    cart: list[CartItemRead]
    cart_total: int
    created_at: datetime | None
    updated_at: datetime | None

    model_config = {"from_attributes": True}
