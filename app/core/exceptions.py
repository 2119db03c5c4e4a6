"""
Domain errors raised by the document write path.

Callers (HTTP layer, scripts, tests) catch these and decide how to surface
them; nothing in here knows about transports.
"""

from __future__ import annotations


class AppError(Exception):
    """Base class for every error raised on purpose by this package."""


class ValidationError(AppError):
    """One or more fields of a document failed validation.

    ``errors`` maps a field path (``"password"``, ``"cart.0.quantity"``)
    to a human-readable message. Schema checks and the password-length
    check both raise this type, so a write reports all of its field
    problems through one channel.
    """

    def __init__(self, errors: dict[str, str] | None = None) -> None:
        self.errors: dict[str, str] = dict(errors or {})
        super().__init__(str(self))

    def add_error(self, field: str, message: str) -> None:
        self.errors[field] = message
        self.args = (str(self),)

    def __str__(self) -> str:
        if not self.errors:
            return "Validation failed"
        return "; ".join(f"{field}: {message}" for field, message in self.errors.items())


class ConflictError(AppError):
    """A unique key (account, email) is already taken."""


class NotFoundError(AppError):
    """A lookup by id found no record."""
