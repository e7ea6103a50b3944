"""Server-side creation and modification timestamps."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import update
from sqlalchemy.orm import Session

from gifted_eternity.models import ListeningParty, Track, User

LONG_AGO = datetime(2000, 1, 1)


def test_creation_timestamps_are_filled_by_the_database(db: Session, test_user: User, test_track: Track):
    assert test_user.created_at is not None
    assert test_user.updated_at is not None
    assert test_user.last_signed_in is not None
    assert test_track.created_at is not None


def test_update_refreshes_updated_at(db: Session, test_track: Track):
    db.execute(update(Track).where(Track.id == test_track.id).values(updated_at=LONG_AGO, created_at=LONG_AGO))
    db.commit()
    db.refresh(test_track)
    assert test_track.updated_at == LONG_AGO

    test_track.title = "Renamed"
    db.commit()
    db.refresh(test_track)

    assert test_track.updated_at > LONG_AGO
    assert test_track.created_at == LONG_AGO


def test_snake_case_tables_refresh_updated_at(db: Session, test_user: User):
    party = ListeningParty(party_id="party-ts", host_user_id=test_user.id, party_name="Morning")
    db.add(party)
    db.commit()
    db.execute(update(ListeningParty).where(ListeningParty.id == party.id).values(updated_at=LONG_AGO))
    db.commit()

    party.party_name = "Evening"
    db.commit()
    db.refresh(party)

    assert party.updated_at > LONG_AGO
