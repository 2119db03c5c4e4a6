"""
Change-set detection for in-flight ORM records.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import inspect


def changed_fields(record: object, names: Iterable[str]) -> frozenset[str]:
    """Return the subset of *names* whose value differs from the last commit.

    Reads SQLAlchemy attribute history, so it must be called before the
    record is flushed. On a record that has never been written, every
    attribute that was given a value counts as changed.
    """
    state = inspect(record)
    return frozenset(name for name in names if state.attrs[name].history.has_changes())
