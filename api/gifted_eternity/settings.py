"""Centralized environment-driven settings.

Keep this module lightweight: stdlib only, no package imports, to avoid circular deps.
"""

from __future__ import annotations

import os
from urllib.parse import quote_plus


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def log_level() -> str:
    return _str_env("LOG_LEVEL", "INFO").upper()


def get_database_url() -> str:
    """
    Build the SQLAlchemy URL for the catalog database.

    DATABASE_URL wins when set. Otherwise the URL is assembled from
    DB_HOST / DB_PORT / DB_USER / DB_PASSWORD / DB_NAME, read at call time
    so scripts and tests can adjust the environment first.
    """
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    db_host = _str_env("DB_HOST", "localhost")
    db_port = _int_env("DB_PORT", 5432)
    db_user = _str_env("DB_USER", "root")
    db_pass = _str_env("DB_PASSWORD", "")
    db_name = _str_env("DB_NAME", "gifted_eternity")

    # URL-encode the password in case it contains special characters
    credentials = quote_plus(db_user)
    if db_pass:
        credentials = f"{credentials}:{quote_plus(db_pass)}"
    return f"postgresql+psycopg://{credentials}@{db_host}:{db_port}/{db_name}"
