"""Uniqueness, enum-domain, not-null and reference rules enforced by the database."""

from __future__ import annotations

import pytest
from sqlalchemy import CheckConstraint, Enum as SAEnum, text
from sqlalchemy.orm import Session

from gifted_eternity import catalog
from gifted_eternity.enums import PartyStatus, UserRole
from gifted_eternity.errors import (
    CheckViolation,
    ForeignKeyViolation,
    NotNullViolation,
    UniqueViolation,
    translate_integrity_errors,
)
from gifted_eternity.models import (
    Collaborator,
    ListeningParty,
    MusicUpload,
    PartyUserVote,
    PartyVote,
    Track,
    TrackReview,
    User,
    UserFollow,
)


def _music_upload(db: Session, user: User) -> MusicUpload:
    upload = MusicUpload(
        uploaded_by=user.id,
        title="Demo",
        artist="Test Artist",
        file_key="uploads/demo.mp3",
        file_url="https://example.com/uploads/demo.mp3",
        mime_type="audio/mpeg",
    )
    db.add(upload)
    db.commit()
    return upload


def test_second_review_for_same_track_violates_user_track_unique(
    db: Session, test_user: User, test_track: Track
):
    db.add(TrackReview(user_id=test_user.id, track_id=test_track.id, rating=5))
    db.commit()

    with pytest.raises(UniqueViolation) as exc_info:
        with translate_integrity_errors(db):
            db.add(TrackReview(user_id=test_user.id, track_id=test_track.id, rating=1))
            db.commit()

    assert exc_info.value.constraint_name == "userTrackUnique"
    assert exc_info.value.table == "trackReviews"
    assert set(exc_info.value.columns) == {"userId", "trackId"}
    # Session is usable again after the translated failure
    assert db.query(TrackReview).count() == 1


def test_duplicate_open_id_is_rejected(db: Session, test_user: User):
    with pytest.raises(UniqueViolation) as exc_info:
        with translate_integrity_errors(db):
            db.add(User(open_id=test_user.open_id))
            db.commit()

    assert exc_info.value.table == "users"
    assert exc_info.value.columns == ("openId",)


def test_follow_pair_is_unique(db: Session, test_user: User):
    other = User(open_id="other-open-id")
    db.add(other)
    db.commit()

    db.add(UserFollow(follower_id=test_user.id, following_id=other.id))
    db.commit()

    # Reverse direction is a different pair
    db.add(UserFollow(follower_id=other.id, following_id=test_user.id))
    db.commit()

    with pytest.raises(UniqueViolation) as exc_info:
        with translate_integrity_errors(db):
            db.add(UserFollow(follower_id=test_user.id, following_id=other.id))
            db.commit()

    assert exc_info.value.constraint_name == "followerFollowingUnique"


def test_collaborator_is_unique_per_upload(db: Session, test_user: User):
    upload = _music_upload(db, test_user)
    db.add(Collaborator(user_id=test_user.id, music_upload_id=upload.id))
    db.commit()

    with pytest.raises(UniqueViolation) as exc_info:
        with translate_integrity_errors(db):
            db.add(Collaborator(user_id=test_user.id, music_upload_id=upload.id))
            db.commit()

    assert exc_info.value.constraint_name == "unique_collaborator"


def test_one_ballot_per_user_per_party_vote(db: Session, test_user: User):
    party = ListeningParty(party_id="party-abc", host_user_id=test_user.id, party_name="Sunday")
    db.add(party)
    db.commit()
    poll = PartyVote(party_id=party.party_id, vote_type="skip", initiated_by_user_id=test_user.id, required_votes=2)
    db.add(poll)
    db.commit()

    db.add(PartyUserVote(vote_id=poll.id, user_id=test_user.id, vote="for"))
    db.commit()

    with pytest.raises(UniqueViolation) as exc_info:
        with translate_integrity_errors(db):
            db.add(PartyUserVote(vote_id=poll.id, user_id=test_user.id, vote="against"))
            db.commit()

    assert exc_info.value.constraint_name == "party_user_votes_unique_idx"


def test_every_enum_column_is_guarded_by_a_named_check():
    for table in catalog.get_metadata().sorted_tables:
        checks = {str(c.name) for c in table.constraints if isinstance(c, CheckConstraint)}
        for column in table.columns:
            if isinstance(column.type, SAEnum):
                assert column.type.name == f"ck_{table.name}_{column.name}"
                assert column.type.name in checks, f"{table.name}.{column.name}"


@pytest.mark.parametrize(
    "statement,constraint",
    [
        ("INSERT INTO \"users\" (\"openId\", \"role\") VALUES ('raw-1', 'superuser')", "ck_users_role"),
        (
            "INSERT INTO \"posts\" (\"title\", \"content\", \"type\") VALUES ('t', 'c', 'advert')",
            "ck_posts_type",
        ),
        (
            "INSERT INTO \"pushTokens\" (\"userId\", \"token\", \"platform\") VALUES (1, 'tok', 'blackberry')",
            "ck_pushTokens_platform",
        ),
    ],
)
def test_raw_sql_outside_enum_domain_is_rejected(
    db: Session, test_user: User, statement: str, constraint: str
):
    with pytest.raises(CheckViolation) as exc_info:
        with translate_integrity_errors(db):
            db.execute(text(statement))
            db.commit()

    assert exc_info.value.constraint_name == constraint


def test_orm_write_outside_enum_domain_is_rejected_by_the_database(db: Session, test_user: User):
    with pytest.raises(CheckViolation) as exc_info:
        with translate_integrity_errors(db):
            db.add(
                ListeningParty(
                    party_id="party-bad",
                    host_user_id=test_user.id,
                    party_name="Bad",
                    status="archived",
                )
            )
            db.commit()

    assert exc_info.value.constraint_name == "ck_listening_parties_status"


def test_enum_columns_read_back_as_members(db: Session, test_user: User):
    db.add(ListeningParty(party_id="party-ok", host_user_id=test_user.id, party_name="Ok"))
    db.commit()
    db.expire_all()

    party = db.query(ListeningParty).filter_by(party_id="party-ok").one()
    user = db.get(User, test_user.id)

    assert party.status is PartyStatus.ACTIVE
    assert user.role is UserRole.USER


def test_missing_required_column(db: Session, test_user: User):
    with pytest.raises(NotNullViolation) as exc_info:
        with translate_integrity_errors(db):
            db.add(Track(title="No duration", artist_id=test_user.id, audio_url="https://example.com/a.mp3"))
            db.commit()

    assert exc_info.value.table == "tracks"
    assert exc_info.value.columns == ("duration",)


def test_reference_to_missing_parent(db: Session):
    with pytest.raises(ForeignKeyViolation):
        with translate_integrity_errors(db):
            db.add(Track(title="Orphan", artist_id=999, duration=100, audio_url="https://example.com/o.mp3"))
            db.commit()
