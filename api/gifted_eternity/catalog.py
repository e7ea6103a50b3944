"""
Read-only view of the declared schema, plus create/drop for development and tests.

Production databases are built with Alembic (see ``migrations.run_migrations``);
``create_all`` materialises the same metadata directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from sqlalchemy import Enum as SAEnum
from sqlalchemy import MetaData, UniqueConstraint
from sqlalchemy.engine import Engine

from . import models  # noqa: F401  registers every table on Base.metadata
from .db import Base

logger = logging.getLogger(__name__)


class DeletePolicy(str, Enum):
    CASCADE = "cascade"
    SET_NULL = "set null"
    RESTRICT = "restrict"


@dataclass(frozen=True)
class ForeignKeyRule:
    child_table: str
    child_column: str
    parent_table: str
    parent_column: str
    policy: DeletePolicy


@dataclass(frozen=True)
class EnumColumn:
    table: str
    column: str
    values: tuple[str, ...]


@dataclass(frozen=True)
class UniqueRule:
    table: str
    name: str | None  # None for column-level unique flags
    columns: tuple[str, ...]


def get_metadata() -> MetaData:
    return Base.metadata


def create_all(engine: Engine) -> None:
    """Create every declared table that does not exist yet."""
    metadata = get_metadata()
    metadata.create_all(bind=engine)
    logger.info("Created schema (%d tables) on %s", len(metadata.tables), engine.url.render_as_string())


def drop_all(engine: Engine) -> None:
    metadata = get_metadata()
    metadata.drop_all(bind=engine)
    logger.info("Dropped schema (%d tables) on %s", len(metadata.tables), engine.url.render_as_string())


def table_names() -> list[str]:
    return sorted(get_metadata().tables)


def _policy(ondelete: str | None) -> DeletePolicy:
    if ondelete is None:
        return DeletePolicy.RESTRICT
    normalized = ondelete.strip().lower()
    if normalized == "cascade":
        return DeletePolicy.CASCADE
    if normalized == "set null":
        return DeletePolicy.SET_NULL
    if normalized in ("restrict", "no action"):
        return DeletePolicy.RESTRICT
    raise ValueError(f"Unsupported ON DELETE policy: {ondelete!r}")


def foreign_keys() -> list[ForeignKeyRule]:
    """
    Every declared foreign key with its delete policy.

    A foreign key without ON DELETE is reported as RESTRICT: the database
    refuses to delete the parent while children reference it.
    """
    rules: list[ForeignKeyRule] = []
    for table in get_metadata().sorted_tables:
        for fk in sorted(table.foreign_keys, key=lambda f: f.parent.name):
            rules.append(
                ForeignKeyRule(
                    child_table=table.name,
                    child_column=fk.parent.name,
                    parent_table=fk.column.table.name,
                    parent_column=fk.column.name,
                    policy=_policy(fk.ondelete),
                )
            )
    return rules


def enum_columns() -> list[EnumColumn]:
    """Every enum-typed column with the literal values it accepts."""
    found: list[EnumColumn] = []
    for table in get_metadata().sorted_tables:
        for column in table.columns:
            if isinstance(column.type, SAEnum):
                found.append(
                    EnumColumn(
                        table=table.name,
                        column=column.name,
                        values=tuple(column.type.enums),
                    )
                )
    return found


def unique_constraints() -> list[UniqueRule]:
    """Single-column and composite uniqueness rules, primary keys excluded."""
    rules: list[UniqueRule] = []
    for table in get_metadata().sorted_tables:
        for constraint in table.constraints:
            if not isinstance(constraint, UniqueConstraint):
                continue
            rules.append(
                UniqueRule(
                    table=table.name,
                    name=constraint.name if isinstance(constraint.name, str) else None,
                    columns=tuple(column.name for column in constraint.columns),
                )
            )
    return sorted(rules, key=lambda rule: (rule.table, rule.columns))


def unique_constraint_name(table: str, columns: tuple[str, ...] | list[str]) -> str | None:
    """Declared name of the unique constraint covering exactly `columns` on `table`."""
    wanted = set(columns)
    for rule in unique_constraints():
        if rule.table == table and set(rule.columns) == wanted:
            return rule.name
    return None
