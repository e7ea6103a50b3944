#!/usr/bin/env python3
"""
Seed gospel tracks through the ORM.

Inserts the 50-track gospel catalog one row at a time, committing after
each insert. Not idempotent: every run adds another 50 rows.

Usage:
    python -m gifted_eternity.seed
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .db import SessionLocal, make_engine
from .errors import ConstraintViolation, SeedError, translate_integrity_errors
from .models import Album, Track, User
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


def ensure_references(session: Session) -> None:
    """Create the placeholder artists and album the catalog points at, if missing."""
    with translate_integrity_errors(session):
        for artist_id, name in PLACEHOLDER_ARTISTS.items():
            if session.get(User, artist_id) is None:
                session.add(User(id=artist_id, open_id=placeholder_open_id(artist_id), name=name))
        session.flush()

        if session.get(Album, SEED_ALBUM_ID) is None:
            session.add(Album(id=SEED_ALBUM_ID, title=SEED_ALBUM_TITLE, artist_id=DEFAULT_ARTIST_ID))
            session.flush()

        advance_sequences(session.connection(), ("users", "albums"))
        session.commit()


def seed_tracks(session: Session, tracks: Iterable[SeedTrack] = GOSPEL_TRACKS) -> list[str]:
    """
    Insert every track and return the inserted titles in order.

    The first failing insert stops the run with a SeedError carrying the
    titles committed so far.
    """
    inserted: list[str] = []

    try:
        ensure_references(session)
    except (ConstraintViolation, SQLAlchemyError) as exc:
        session.rollback()
        raise SeedError(f"Could not prepare seed references: {exc}", inserted) from exc

    for track in tracks:
        try:
            with translate_integrity_errors(session):
                session.add(Track(**track_values(track)))
                session.commit()
        except (ConstraintViolation, SQLAlchemyError) as exc:
            session.rollback()
            raise SeedError(f"Failed to insert {track.title!r}: {exc}", inserted) from exc

        inserted.append(track.title)
        logger.info("Added: %s by %s", track.title, track.artist)

    return inserted


def main() -> int:
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(level=log_level(), format="%(asctime)s [%(levelname)s] %(message)s")

    engine = make_engine(get_database_url())
    logger.info("Starting to seed gospel tracks...")
    try:
        with SessionLocal(bind=engine) as session:
            inserted = seed_tracks(session)
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
