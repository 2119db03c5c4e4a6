"""Validate ORM records against their pydantic document schema."""

from __future__ import annotations

import pydantic

from app.core.exceptions import ValidationError


def _message(error: dict) -> str:
    if error.get("input") is None:
        return "Field is required"
    # field_validator failures: drop pydantic's "Value error, " prefix
    cause = error.get("ctx", {}).get("error")
    if error["type"] == "value_error" and cause is not None:
        return str(cause)
    return error["msg"]


def validate_document(schema: type[pydantic.BaseModel], record: object) -> pydantic.BaseModel:
    """Check *record* against *schema*, collecting every field error.

    Raises :class:`ValidationError` keyed by dotted field path
    (``cart.1.quantity``) when anything fails.
    """
    try:
        return schema.model_validate(record, from_attributes=True)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            {".".join(str(part) for part in err["loc"]): _message(err) for err in exc.errors()}
        ) from None
