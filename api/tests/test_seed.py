"""Gospel catalog seeding, through the ORM and through raw SQL."""

from __future__ import annotations

from typing import Generator

import pytest
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from gifted_eternity import catalog, seed, seed_catalog, seed_sql
from gifted_eternity.db import SessionLocal, make_engine
from gifted_eternity.errors import ForeignKeyViolation, SeedError
from gifted_eternity.models import Album, Track, User
from gifted_eternity.seed_catalog import GOSPEL_TRACKS, SeedTrack

FIRST_FOUR = ["Amazing Grace", "How Great Thou Art", "Jesus Loves Me", "I'll Fly Away"]


@pytest.fixture()
def other_engine() -> Generator[Engine, None, None]:
    """A second, independent in-memory database."""
    second = make_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    catalog.create_all(second)
    try:
        yield second
    finally:
        second.dispose()


def _track_rows(engine: Engine) -> list[tuple]:
    with SessionLocal(bind=engine) as session:
        return [
            tuple(row)
            for row in session.execute(
                select(
                    Track.title,
                    Track.artist_id,
                    Track.album_id,
                    Track.genre,
                    Track.duration,
                    Track.audio_url,
                    Track.cover_art_url,
                    Track.is_published,
                ).order_by(Track.id)
            )
        ]


def test_catalog_has_fifty_distinct_gospel_tracks():
    assert len(GOSPEL_TRACKS) == 50
    assert len({track.title for track in GOSPEL_TRACKS}) == 50
    assert {track.genre for track in GOSPEL_TRACKS} == {"Gospel"}
    assert {track.artist for track in GOSPEL_TRACKS} <= set(seed_catalog.ARTIST_IDS)


def test_artist_mapping():
    assert seed_catalog.artist_id_for("Damone Ward Sr.") == 1
    assert seed_catalog.artist_id_for("Gospel Choir") == 2
    assert seed_catalog.artist_id_for("Gospel Singers") == 3
    assert seed_catalog.artist_id_for("Gospel Ensemble") == 4
    assert seed_catalog.artist_id_for("gospel choir") == 1
    assert seed_catalog.artist_id_for("Someone Else") == 1


@pytest.mark.parametrize(
    "title,url",
    [
        ("Amazing Grace", "https://example.com/audio/amazing-grace.mp3"),
        ("I'll Fly Away", "https://example.com/audio/i'll-fly-away.mp3"),
        ("Jesus Christ is Risen Today", "https://example.com/audio/jesus-christ-is-risen-today.mp3"),
        ("It  Is\tWell", "https://example.com/audio/it-is-well.mp3"),
    ],
)
def test_audio_url_slug(title, url):
    assert seed_catalog.audio_url_for(title) == url


def test_track_values():
    values = seed_catalog.track_values(GOSPEL_TRACKS[2])

    assert values == {
        "title": "Jesus Loves Me",
        "artist_id": 2,
        "album_id": 1,
        "genre": "Gospel",
        "duration": 180,
        "audio_url": "https://example.com/audio/jesus-loves-me.mp3",
        "cover_art_url": "https://example.com/cover.jpg",
        "is_published": True,
    }


def test_seed_track_rejects_bad_entries():
    with pytest.raises(ValidationError):
        SeedTrack(title="", artist="Gospel Choir", album="x", genre="Gospel", duration=100)
    with pytest.raises(ValidationError):
        SeedTrack(title="Silence", artist="Gospel Choir", album="x", genre="Gospel", duration=0)


def test_orm_seed_inserts_every_track(db: Session):
    inserted = seed.seed_tracks(db)

    assert inserted == [track.title for track in GOSPEL_TRACKS]
    assert db.query(Track).count() == 50
    assert db.query(Track).filter(Track.is_published.is_(True)).count() == 50
    assert db.query(Track).filter(Track.album_id == 1).count() == 50


def test_orm_seed_creates_placeholders_once(db: Session):
    seed.seed_tracks(db)
    seed.seed_tracks(db)

    # Not idempotent for tracks; references are only created when missing
    assert db.query(Track).count() == 100
    assert db.query(User).count() == 4
    assert db.query(Album).count() == 1
    artist = db.get(User, 4)
    assert artist.open_id == "seed-artist-4"
    assert artist.name == "Gospel Ensemble"
    assert db.get(Album, 1).title == "Hymns of Faith"


def test_orm_seed_keeps_existing_users(db: Session):
    db.add(User(id=2, open_id="real-account", name="Real Account"))
    db.commit()

    seed.seed_tracks(db)

    assert db.get(User, 2).open_id == "real-account"
    assert db.query(Track).filter(Track.artist_id == 2).count() == 13


def test_orm_seed_stops_at_first_failure(db: Session, monkeypatch):
    monkeypatch.setitem(seed_catalog.ARTIST_IDS, "Gospel Ensemble", 999)

    with pytest.raises(SeedError) as exc_info:
        seed.seed_tracks(db)

    assert exc_info.value.inserted == FIRST_FOUR
    assert "Oh Happy Day" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, ForeignKeyViolation)
    # Earlier rows stay committed
    assert db.query(Track).count() == 4


def test_sql_seed_inserts_every_track(engine: Engine):
    inserted = seed_sql.seed_tracks(engine)

    assert inserted == [track.title for track in GOSPEL_TRACKS]
    assert len(_track_rows(engine)) == 50


def test_sql_seed_twice(engine: Engine):
    seed_sql.seed_tracks(engine)
    seed_sql.seed_tracks(engine)

    with SessionLocal(bind=engine) as session:
        assert session.query(Track).count() == 100
        assert session.query(User).count() == 4
        assert session.query(Album).count() == 1


def test_sql_seed_stops_at_first_failure(engine: Engine, monkeypatch):
    monkeypatch.setitem(seed_catalog.ARTIST_IDS, "Gospel Ensemble", 999)

    with pytest.raises(SeedError) as exc_info:
        seed_sql.seed_tracks(engine)

    assert exc_info.value.inserted == FIRST_FOUR
    assert "FOREIGN KEY constraint failed" in str(exc_info.value)
    assert len(_track_rows(engine)) == 4


def test_both_variants_write_identical_rows(engine: Engine, other_engine: Engine):
    with SessionLocal(bind=engine) as session:
        seed.seed_tracks(session)
    seed_sql.seed_tracks(other_engine)

    orm_rows = _track_rows(engine)
    sql_rows = _track_rows(other_engine)

    assert orm_rows == sql_rows
    assert orm_rows[0] == (
        "Amazing Grace",
        1,
        1,
        "Gospel",
        240,
        "https://example.com/audio/amazing-grace.mp3",
        "https://example.com/cover.jpg",
        True,
    )


@pytest.mark.parametrize("module", [seed, seed_sql])
def test_main_reports_success(module, tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'seed.db'}"
    target = make_engine(url)
    catalog.create_all(target)
    target.dispose()
    monkeypatch.setenv("DATABASE_URL", url)

    assert module.main() == 0

    check = make_engine(url)
    try:
        assert len(_track_rows(check)) == 50
    finally:
        check.dispose()


@pytest.mark.parametrize("module", [seed, seed_sql])
def test_main_reports_failure_without_schema(module, tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'empty.db'}")

    assert module.main() == 1
