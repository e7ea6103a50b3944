from __future__ import annotations

from typing import Generator

import pytest
from dotenv import load_dotenv
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from gifted_eternity import catalog
from gifted_eternity.db import SessionLocal, make_engine
from gifted_eternity.models import Album, Track, User

load_dotenv()


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite with foreign keys on and a freshly created schema."""
    test_engine = make_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    catalog.create_all(test_engine)
    try:
        yield test_engine
    finally:
        test_engine.dispose()


@pytest.fixture()
def db(engine: Engine) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    session = SessionLocal(bind=engine)
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def test_user(db: Session) -> User:
    """Create a test user."""
    user = User(open_id="test-open-id", name="Test User", email="test@example.com")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_album(test_user: User, db: Session) -> Album:
    album = Album(title="Test Album", artist_id=test_user.id)
    db.add(album)
    db.commit()
    db.refresh(album)
    return album


@pytest.fixture
def test_track(test_user: User, test_album: Album, db: Session) -> Track:
    """Create a published track on the test album."""
    track = Track(
        title="Test Track",
        artist_id=test_user.id,
        album_id=test_album.id,
        duration=200,
        audio_url="https://example.com/audio/test-track.mp3",
        is_published=True,
    )
    db.add(track)
    db.commit()
    db.refresh(track)
    return track
