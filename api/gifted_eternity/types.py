"""Custom SQLAlchemy column types."""

from __future__ import annotations

from enum import Enum as PyEnum

from sqlalchemy import Enum


def _enum_values(enum_cls: type[PyEnum]) -> list[str]:
    return [member.value for member in enum_cls]


def enum_type(enum_cls: type[PyEnum], name: str) -> Enum:
    """
    Map a str Enum onto a bounded VARCHAR guarded by a named CHECK constraint.

    Values (not member names) are stored. Strings are passed through unvalidated
    so an out-of-domain value is rejected by the database itself, the same way
    a raw INSERT would be.
    """
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        values_callable=_enum_values,
        validate_strings=False,
    )
