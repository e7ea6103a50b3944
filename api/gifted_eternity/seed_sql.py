#!/usr/bin/env python3
"""
Seed gospel tracks with raw parameterised INSERT statements.

Same rows as ``gifted_eternity.seed`` without going through the ORM.
Identifiers are quoted because the catalog tables use camelCase columns.

Usage:
    python -m gifted_eternity.seed_sql
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .db import make_engine
from .errors import SeedError, classify_integrity_error
from .seed_catalog import (
    DEFAULT_ARTIST_ID,
    GOSPEL_TRACKS,
    PLACEHOLDER_ARTISTS,
    SEED_ALBUM_ID,
    SEED_ALBUM_TITLE,
    SeedTrack,
    advance_sequences,
    placeholder_open_id,
    track_values,
)
from .settings import get_database_url, log_level

logger = logging.getLogger(__name__)

INSERT_PLACEHOLDER_USER = text(
    'INSERT INTO "users" ("id", "openId", "name") '
    "SELECT :id, :open_id, :name "
    'WHERE NOT EXISTS (SELECT 1 FROM "users" WHERE "id" = :id)'
)

INSERT_PLACEHOLDER_ALBUM = text(
    'INSERT INTO "albums" ("id", "title", "artistId") '
    "SELECT :id, :title, :artist_id "
    'WHERE NOT EXISTS (SELECT 1 FROM "albums" WHERE "id" = :id)'
)

INSERT_TRACK = text(
    'INSERT INTO "tracks" '
    '("title", "artistId", "albumId", "genre", "duration", "audioUrl", "coverArtUrl", "isPublished") '
    "VALUES (:title, :artist_id, :album_id, :genre, :duration, :audio_url, :cover_art_url, :is_published)"
)


def _describe(exc: SQLAlchemyError) -> Exception:
    if isinstance(exc, IntegrityError):
        return classify_integrity_error(exc)
    return exc


def ensure_references(connection: Connection) -> None:
    for artist_id, name in PLACEHOLDER_ARTISTS.items():
        connection.execute(
            INSERT_PLACEHOLDER_USER,
            {"id": artist_id, "open_id": placeholder_open_id(artist_id), "name": name},
        )
    connection.execute(
        INSERT_PLACEHOLDER_ALBUM,
        {"id": SEED_ALBUM_ID, "title": SEED_ALBUM_TITLE, "artist_id": DEFAULT_ARTIST_ID},
    )
    advance_sequences(connection, ("users", "albums"))
    connection.commit()


def seed_tracks(engine: Engine, tracks: Iterable[SeedTrack] = GOSPEL_TRACKS) -> list[str]:
    """Insert every track over one connection, committing each row. Returns the titles inserted."""
    inserted: list[str] = []

    try:
        connection = engine.connect()
    except SQLAlchemyError as exc:
        raise SeedError(f"Could not connect to the database: {exc}", inserted) from exc

    with connection:
        try:
            ensure_references(connection)
        except SQLAlchemyError as exc:
            connection.rollback()
            raise SeedError(f"Could not prepare seed references: {_describe(exc)}", inserted) from exc

        for track in tracks:
            try:
                connection.execute(INSERT_TRACK, track_values(track))
                connection.commit()
            except SQLAlchemyError as exc:
                connection.rollback()
                raise SeedError(f"Failed to insert {track.title!r}: {_describe(exc)}", inserted) from exc

            inserted.append(track.title)
            logger.info("Added: %s by %s", track.title, track.artist)

    return inserted


def main() -> int:
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(level=log_level(), format="%(asctime)s [%(levelname)s] %(message)s")

    engine = make_engine(get_database_url())
    logger.info("Starting to seed gospel tracks (direct SQL)...")
    try:
        inserted = seed_tracks(engine)
    except SeedError as exc:
        logger.error("Error seeding tracks: %s", exc)
        logger.error("Inserted before failure (%d): %s", len(exc.inserted), ", ".join(exc.inserted) or "-")
        return 1
    finally:
        engine.dispose()

    logger.info("Successfully seeded %d gospel tracks!", len(inserted))
    return 0


if __name__ == "__main__":
    sys.exit(main())
