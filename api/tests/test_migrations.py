"""Alembic revisions build the same schema as the declared models."""

from __future__ import annotations

import pytest
from alembic import command
from sqlalchemy import inspect
from sqlalchemy.engine import Inspector

from gifted_eternity import catalog
from gifted_eternity.db import make_engine
from gifted_eternity.migrations import _alembic_config, run_migrations


@pytest.fixture()
def migrated_url(tmp_path) -> str:
    url = f"sqlite:///{tmp_path / 'catalog.db'}"
    run_migrations(url)
    return url


@pytest.fixture()
def inspector(migrated_url: str):
    engine = make_engine(migrated_url)
    try:
        yield inspect(engine)
    finally:
        engine.dispose()


@pytest.fixture()
def declared_inspector(tmp_path):
    """The same schema built straight from the models, for reflected comparisons."""
    engine = make_engine(f"sqlite:///{tmp_path / 'declared.db'}")
    catalog.create_all(engine)
    try:
        yield inspect(engine)
    finally:
        engine.dispose()


def _model_foreign_keys(table) -> set[tuple]:
    return {
        (
            fk.parent.name,
            fk.column.table.name,
            fk.column.name,
            (fk.ondelete or "").upper(),
        )
        for fk in table.foreign_keys
    }


def _reflected_foreign_keys(inspector: Inspector, name: str) -> set[tuple]:
    found = set()
    for fk in inspector.get_foreign_keys(name):
        ondelete = (fk.get("options") or {}).get("ondelete") or ""
        for local, remote in zip(fk["constrained_columns"], fk["referred_columns"]):
            found.add((local, fk["referred_table"], remote, ondelete.upper()))
    return found


def test_upgrade_creates_every_table(inspector: Inspector):
    assert set(inspector.get_table_names()) == set(catalog.table_names()) | {"alembic_version"}


def test_columns_and_nullability_match_the_models(inspector: Inspector):
    for table in catalog.get_metadata().sorted_tables:
        reflected = {column["name"]: column["nullable"] for column in inspector.get_columns(table.name)}
        declared = {column.name: column.nullable for column in table.columns}
        if "id" in declared:
            # SQLite reports INTEGER PRIMARY KEY as nullable
            reflected["id"] = declared["id"]
        assert reflected == declared, table.name


def test_foreign_keys_match_the_models(inspector: Inspector):
    for table in catalog.get_metadata().sorted_tables:
        assert _reflected_foreign_keys(inspector, table.name) == _model_foreign_keys(table), table.name


def test_indexes_match_the_models(inspector: Inspector):
    for table in catalog.get_metadata().sorted_tables:
        reflected = {index["name"] for index in inspector.get_indexes(table.name)}
        declared = {index.name for index in table.indexes}
        assert reflected == declared, table.name


def test_named_uniques_match_the_models(inspector: Inspector):
    declared = {(rule.table, rule.name) for rule in catalog.unique_constraints() if rule.name}
    reflected = {
        (name, constraint["name"])
        for name in catalog.table_names()
        for constraint in inspector.get_unique_constraints(name)
        if constraint["name"]
    }
    assert declared <= reflected


def test_column_types_and_defaults_match_the_models(inspector: Inspector, declared_inspector: Inspector):
    for name in catalog.table_names():
        migrated = sorted(
            (column["name"], str(column["type"]), column.get("default"))
            for column in inspector.get_columns(name)
        )
        declared = sorted(
            (column["name"], str(column["type"]), column.get("default"))
            for column in declared_inspector.get_columns(name)
        )
        assert migrated == declared, name


def test_check_constraints_match_the_models(inspector: Inspector, declared_inspector: Inspector):
    for name in catalog.table_names():
        migrated = sorted((check["name"] or "", check["sqltext"]) for check in inspector.get_check_constraints(name))
        declared = sorted(
            (check["name"] or "", check["sqltext"]) for check in declared_inspector.get_check_constraints(name)
        )
        assert migrated == declared, name


def test_all_uniques_match_the_models(inspector: Inspector, declared_inspector: Inspector):
    def uniques(source: Inspector, name: str) -> list[tuple]:
        return sorted(
            (constraint["name"] or "", tuple(constraint["column_names"]))
            for constraint in source.get_unique_constraints(name)
        )

    for name in catalog.table_names():
        assert uniques(inspector, name) == uniques(declared_inspector, name), name

    rules = {(rule.table, rule.columns) for rule in catalog.unique_constraints()}
    reflected = {
        (name, tuple(constraint["column_names"]))
        for name in catalog.table_names()
        for constraint in inspector.get_unique_constraints(name)
    }
    assert reflected == rules


def test_run_migrations_is_a_no_op_at_head(migrated_url: str, caplog):
    caplog.set_level("INFO", logger="gifted_eternity.migrations")

    run_migrations(migrated_url)

    assert "skipping migrations" in caplog.text


def test_downgrade_to_base_removes_every_table(migrated_url: str):
    command.downgrade(_alembic_config(migrated_url), "base")

    engine = make_engine(migrated_url)
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()
