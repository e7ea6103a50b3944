"""Every declared uniqueness rule and enum domain, exercised against the database."""

from __future__ import annotations

import itertools
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, Iterable

import pytest
from sqlalchemy import Boolean, Column, Date, DateTime, Enum as SAEnum, Integer, Numeric, Table, func, insert, select
from sqlalchemy.orm import Session

from gifted_eternity import catalog
from gifted_eternity.errors import CheckViolation, UniqueViolation, translate_integrity_errors

_sequence = itertools.count(1)


def _table(name: str) -> Table:
    return catalog.get_metadata().tables[name]


def _fresh_value(column: Column) -> Any:
    n = next(_sequence)
    kind = column.type
    # Enum subclasses String, so it is checked first
    if isinstance(kind, SAEnum):
        return kind.enums[0]
    if isinstance(kind, Boolean):
        return False
    if isinstance(kind, DateTime):
        return datetime(2026, 1, 1) + timedelta(seconds=n)
    if isinstance(kind, Date):
        return date(2026, 1, 1) + timedelta(days=n)
    if isinstance(kind, Numeric):
        return Decimal("1.00")
    if isinstance(kind, Integer):
        return n
    return f"v{n}"


def _insert_row(
    db: Session,
    table: Table,
    fill: Iterable[str] = (),
    fixed: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Insert a minimal valid row and return its column values.

    Required columns get fresh values, parents included for required foreign
    keys. Columns in `fill` are populated even when nullable or defaulted, and
    `fixed` pins exact values.
    """
    fixed = fixed or {}
    wanted = set(fill) | set(fixed)
    values: dict[str, Any] = {}
    for column in table.columns:
        if column.primary_key:
            continue
        if column.name in fixed:
            values[column.name] = fixed[column.name]
        elif column.name in wanted or (not column.nullable and column.server_default is None):
            values[column.name] = _parent_value(db, column) if column.foreign_keys else _fresh_value(column)

    result = db.execute(insert(table).values({table.c[name]: value for name, value in values.items()}))
    values["id"] = result.inserted_primary_key[0]
    return values


def _parent_value(db: Session, column: Column) -> Any:
    target = next(iter(column.foreign_keys)).column
    parent = _insert_row(db, target.table, fill=[target.name])
    return parent[target.name]


@pytest.mark.parametrize(
    "rule",
    catalog.unique_constraints(),
    ids=lambda rule: f"{rule.table}:{'+'.join(rule.columns)}",
)
def test_duplicate_row_violates_unique_rule(db: Session, rule: catalog.UniqueRule):
    table = _table(rule.table)
    first = _insert_row(db, table, fill=rule.columns)
    db.commit()

    with pytest.raises(UniqueViolation) as exc_info:
        with translate_integrity_errors(db):
            _insert_row(db, table, fixed={name: first[name] for name in rule.columns})
            db.commit()

    violation = exc_info.value
    assert violation.table == rule.table
    assert set(violation.columns) == set(rule.columns)
    assert violation.constraint_name == rule.name


@pytest.mark.parametrize(
    "rule",
    catalog.unique_constraints(),
    ids=lambda rule: f"{rule.table}:{'+'.join(rule.columns)}",
)
def test_distinct_rows_satisfy_unique_rule(db: Session, rule: catalog.UniqueRule):
    table = _table(rule.table)
    _insert_row(db, table, fill=rule.columns)
    _insert_row(db, table, fill=rule.columns)
    db.commit()

    assert db.scalar(select(func.count()).select_from(table)) == 2


@pytest.mark.parametrize(
    "enum_column",
    catalog.enum_columns(),
    ids=lambda enum_column: f"{enum_column.table}.{enum_column.column}",
)
def test_value_outside_enum_domain_is_rejected(db: Session, enum_column: catalog.EnumColumn):
    table = _table(enum_column.table)

    with pytest.raises(CheckViolation) as exc_info:
        with translate_integrity_errors(db):
            _insert_row(db, table, fixed={enum_column.column: "not-a-member"})
            db.commit()

    assert exc_info.value.constraint_name == f"ck_{enum_column.table}_{enum_column.column}"


@pytest.mark.parametrize(
    "enum_column",
    catalog.enum_columns(),
    ids=lambda enum_column: f"{enum_column.table}.{enum_column.column}",
)
def test_every_enum_literal_is_accepted(db: Session, enum_column: catalog.EnumColumn):
    table = _table(enum_column.table)
    for value in enum_column.values:
        _insert_row(db, table, fixed={enum_column.column: value})
    db.commit()

    assert db.scalar(select(func.count()).select_from(table)) == len(enum_column.values)
