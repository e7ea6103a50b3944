from __future__ import annotations

from functools import lru_cache
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .settings import get_database_url, log_level


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores REFERENCES clauses unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(url: str, **kwargs) -> Engine:
    """Create an engine for the given URL with the catalog's connection settings."""
    kwargs.setdefault("echo", log_level() == "DEBUG")
    if make_url(url).get_backend_name() == "sqlite":
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(url, pool_pre_ping=True, **kwargs)


SessionLocal = sessionmaker(autoflush=False, autocommit=False)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return make_engine(get_database_url())


def get_session() -> Generator[Session, None, None]:
    session: Session = SessionLocal(bind=get_engine())
    try:
        yield session
    finally:
        session.close()
