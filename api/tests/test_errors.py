"""Classification of driver integrity errors."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gifted_eternity.errors import (
    CheckViolation,
    ConstraintViolation,
    ForeignKeyViolation,
    NotNullViolation,
    UniqueViolation,
    classify_integrity_error,
    translate_integrity_errors,
)
from gifted_eternity.models import User


class FakePsycopgError(Exception):
    """Stands in for a psycopg error: message plus sqlstate and diagnostics."""

    def __init__(self, message, sqlstate=None, pgcode=None, **diag):
        super().__init__(message)
        if sqlstate is not None:
            self.sqlstate = sqlstate
        if pgcode is not None:
            self.pgcode = pgcode
        self.diag = SimpleNamespace(
            constraint_name=diag.get("constraint_name"),
            table_name=diag.get("table_name"),
            column_name=diag.get("column_name"),
        )


def _integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, orig)


@pytest.mark.parametrize(
    "sqlstate,kind",
    [
        ("23505", UniqueViolation),
        ("23503", ForeignKeyViolation),
        ("23502", NotNullViolation),
        ("23514", CheckViolation),
    ],
)
def test_postgres_sqlstate_selects_the_violation(sqlstate, kind):
    orig = FakePsycopgError(
        "constraint failed",
        sqlstate=sqlstate,
        constraint_name="some_constraint",
        table_name="tracks",
    )

    violation = classify_integrity_error(_integrity_error(orig))

    assert type(violation) is kind
    assert violation.constraint_name == "some_constraint"
    assert violation.table == "tracks"


def test_postgres_not_null_reports_the_column():
    orig = FakePsycopgError(
        'null value in column "duration" violates not-null constraint',
        sqlstate="23502",
        table_name="tracks",
        column_name="duration",
    )

    violation = classify_integrity_error(_integrity_error(orig))

    assert isinstance(violation, NotNullViolation)
    assert violation.columns == ("duration",)


def test_psycopg2_pgcode_is_understood():
    orig = FakePsycopgError(
        'duplicate key value violates unique constraint "userTrackUnique"',
        pgcode="23505",
        constraint_name="userTrackUnique",
        table_name="trackReviews",
    )

    violation = classify_integrity_error(_integrity_error(orig))

    assert isinstance(violation, UniqueViolation)
    assert violation.constraint_name == "userTrackUnique"


def test_unknown_sqlstate_falls_back_to_the_base_class():
    orig = FakePsycopgError("exclusion violation", sqlstate="23P01")

    violation = classify_integrity_error(_integrity_error(orig))

    assert type(violation) is ConstraintViolation
    assert "exclusion violation" in str(violation)


@pytest.mark.parametrize(
    "message,kind,table,columns,constraint",
    [
        (
            "UNIQUE constraint failed: userFollows.followerId, userFollows.followingId",
            UniqueViolation,
            "userFollows",
            ("followerId", "followingId"),
            "followerFollowingUnique",
        ),
        ("UNIQUE constraint failed: users.openId", UniqueViolation, "users", ("openId",), None),
        ("FOREIGN KEY constraint failed", ForeignKeyViolation, None, (), None),
        ("NOT NULL constraint failed: tracks.duration", NotNullViolation, "tracks", ("duration",), None),
        ("CHECK constraint failed: ck_users_role", CheckViolation, None, (), "ck_users_role"),
        ("datatype mismatch", ConstraintViolation, None, (), None),
    ],
)
def test_sqlite_messages(message, kind, table, columns, constraint):
    violation = classify_integrity_error(_integrity_error(Exception(message)))

    assert type(violation) is kind
    assert violation.table == table
    assert violation.columns == columns
    assert violation.constraint_name == constraint


def test_translate_rolls_back_and_chains_the_driver_error(db: Session, test_user: User):
    with pytest.raises(UniqueViolation) as exc_info:
        with translate_integrity_errors(db):
            db.add(User(open_id=test_user.open_id))
            db.flush()

    assert isinstance(exc_info.value.__cause__, IntegrityError)
    # Nothing pending after the rollback
    assert not db.new
    assert db.query(User).count() == 1


def test_translate_leaves_other_errors_alone(db: Session):
    with pytest.raises(ValueError):
        with translate_integrity_errors(db):
            raise ValueError("not a database problem")
