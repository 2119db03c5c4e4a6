"""
Credential preparation run on every user write, right before commit.

Hashes a newly set plaintext password and keeps only the most recent
authentication tokens. The caller passes the change-set so this module
never has to reach into ORM state itself.
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.core.security import get_password_hash
from app.models.user import User

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 4
PASSWORD_MAX_LENGTH = 20
PASSWORD_LENGTH_MESSAGE = (
    f"Password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters"
)


def prepare_credentials(user: User, changes: Collection[str]) -> User:
    """Normalise ``password`` and ``tokens`` on *user* in place.

    Only fields named in *changes* are touched; with neither present this
    is a no-op. Raises :class:`ValidationError` on ``password`` when the
    new plaintext is out of bounds, before anything is hashed.
    """
    if "password" in changes:
        plain = user.password or ""
        if not PASSWORD_MIN_LENGTH <= len(plain) <= PASSWORD_MAX_LENGTH:
            raise ValidationError({"password": PASSWORD_LENGTH_MESSAGE})
        user.password = get_password_hash(plain)
        logger.debug("Password hashed for account %s", user.account)

    limit = settings.MAX_ACTIVE_TOKENS
    if "tokens" in changes and user.tokens and len(user.tokens) > limit:
        dropped = len(user.tokens) - limit
        user.tokens = list(user.tokens[-limit:])
        logger.info("Evicted %d oldest token(s) for account %s", dropped, user.account)

    return user
