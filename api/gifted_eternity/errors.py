"""
Constraint-violation taxonomy for the data-access boundary.

The database enforces every uniqueness, foreign-key, not-null and enum-domain
rule. ``classify_integrity_error`` turns the driver's ``IntegrityError`` into
one of the exceptions below so callers can tell the cases apart without
parsing messages themselves.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Iterator, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class ConstraintViolation(Exception):
    """A write was rejected by a database constraint."""

    def __init__(
        self,
        message: str,
        *,
        constraint_name: str | None = None,
        table: str | None = None,
        columns: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.constraint_name = constraint_name
        self.table = table
        self.columns = tuple(columns)


class UniqueViolation(ConstraintViolation):
    pass


class ForeignKeyViolation(ConstraintViolation):
    """Missing parent row, or a delete blocked by a restrict foreign key."""


class NotNullViolation(ConstraintViolation):
    pass


class CheckViolation(ConstraintViolation):
    """Enum domain or other CHECK constraint."""


class SeedError(Exception):
    """A seed run stopped early. `inserted` lists the titles written before the failure."""

    def __init__(self, message: str, inserted: Sequence[str]) -> None:
        super().__init__(message)
        self.inserted = list(inserted)


# PostgreSQL SQLSTATE class 23 (integrity constraint violation)
_SQLSTATE_KINDS: dict[str, type[ConstraintViolation]] = {
    "23505": UniqueViolation,
    "23503": ForeignKeyViolation,
    "23502": NotNullViolation,
    "23514": CheckViolation,
}

_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (?P<cols>.+)$")
_SQLITE_NOT_NULL = re.compile(r"NOT NULL constraint failed: (?P<table>[^.\s]+)\.(?P<col>\S+)")
_SQLITE_CHECK = re.compile(r"CHECK constraint failed: (?P<name>\S+)")


def _sqlstate(orig: object) -> str | None:
    # psycopg 3 exposes `sqlstate`, psycopg2 `pgcode`
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def _from_postgres(message: str, orig: object, kind: type[ConstraintViolation]) -> ConstraintViolation:
    diag = getattr(orig, "diag", None)
    column = getattr(diag, "column_name", None)
    return kind(
        message,
        constraint_name=getattr(diag, "constraint_name", None),
        table=getattr(diag, "table_name", None),
        columns=(column,) if column else (),
    )


def _from_sqlite(message: str) -> ConstraintViolation:
    match = _SQLITE_UNIQUE.search(message)
    if match:
        qualified = [part.strip() for part in match.group("cols").split(",")]
        table = qualified[0].split(".", 1)[0]
        columns = tuple(part.split(".", 1)[1] for part in qualified)
        # SQLite reports columns, not the constraint; recover the declared name
        from .catalog import unique_constraint_name

        return UniqueViolation(
            message,
            constraint_name=unique_constraint_name(table, columns),
            table=table,
            columns=columns,
        )

    if "FOREIGN KEY constraint failed" in message:
        return ForeignKeyViolation(message)

    match = _SQLITE_NOT_NULL.search(message)
    if match:
        return NotNullViolation(message, table=match.group("table"), columns=(match.group("col"),))

    match = _SQLITE_CHECK.search(message)
    if match:
        return CheckViolation(message, constraint_name=match.group("name"))

    return ConstraintViolation(message)


def classify_integrity_error(exc: IntegrityError) -> ConstraintViolation:
    """Map a driver IntegrityError onto the violation taxonomy."""
    orig = exc.orig
    message = str(orig) if orig is not None else str(exc)

    state = _sqlstate(orig)
    if state is not None:
        kind = _SQLSTATE_KINDS.get(state, ConstraintViolation)
        return _from_postgres(message, orig, kind)

    return _from_sqlite(message)


@contextmanager
def translate_integrity_errors(session: Session) -> Iterator[Session]:
    """
    Run a flush/commit block and re-raise integrity failures as ConstraintViolation.

    The session is rolled back before the classified error propagates, so it
    can be reused by the caller.
    """
    try:
        yield session
    except IntegrityError as exc:
        session.rollback()
        violation = classify_integrity_error(exc)
        logger.debug(
            "%s on %s (%s): %s",
            type(violation).__name__,
            violation.table or "?",
            violation.constraint_name or ", ".join(violation.columns) or "?",
            violation,
        )
        raise violation from exc
