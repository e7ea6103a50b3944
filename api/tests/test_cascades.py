"""Delete behaviour carried by the foreign keys: cascade, set-null and restrict."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import delete
from sqlalchemy.orm import Session

from gifted_eternity.errors import ForeignKeyViolation, translate_integrity_errors
from gifted_eternity.models import (
    Album,
    ArtistResponse,
    ListeningParty,
    MostHelpfulReview,
    MusicUpload,
    PartyReaction,
    PartySyncEvent,
    PartyUserVote,
    PartyVote,
    StripeCustomer,
    StripeInvoice,
    StripeSubscription,
    SubscriptionTier,
    Track,
    TrackPlay,
    TrackReview,
    User,
    UserSubscription,
)


def _user(db: Session, open_id: str) -> User:
    user = User(open_id=open_id)
    db.add(user)
    db.commit()
    return user


def _upload(db: Session, owner: User, title: str) -> MusicUpload:
    upload = MusicUpload(
        uploaded_by=owner.id,
        title=title,
        artist=owner.open_id,
        file_key=f"uploads/{title}.mp3",
        file_url=f"https://example.com/uploads/{title}.mp3",
        mime_type="audio/mpeg",
    )
    db.add(upload)
    db.commit()
    return upload


def test_deleting_a_user_keeps_their_plays_on_other_uploads(db: Session):
    listener = _user(db, "listener")
    other = _user(db, "other-artist")
    own_upload = _upload(db, listener, "own")
    other_upload = _upload(db, other, "other")

    play_other = TrackPlay(music_upload_id=other_upload.id, user_id=listener.id, duration=30)
    play_own = TrackPlay(music_upload_id=own_upload.id, user_id=listener.id, duration=45)
    db.add_all([play_other, play_own])
    db.commit()
    play_other_id, play_own_id, own_upload_id = play_other.id, play_own.id, own_upload.id

    db.execute(delete(User).where(User.id == listener.id))
    db.commit()
    db.expire_all()

    assert db.get(MusicUpload, own_upload_id) is None
    assert db.get(TrackPlay, play_own_id) is None
    remaining = db.get(TrackPlay, play_other_id)
    assert remaining is not None
    assert remaining.user_id is None
    assert remaining.music_upload_id == other_upload.id


def test_deleting_an_album_detaches_its_tracks(db: Session, test_track: Track, test_album: Album):
    track_id = test_track.id

    db.execute(delete(Album).where(Album.id == test_album.id))
    db.commit()
    db.expire_all()

    track = db.get(Track, track_id)
    assert track is not None
    assert track.album_id is None


def test_deleting_an_artist_removes_their_tracks(db: Session, test_user: User, test_track: Track):
    track_id = test_track.id

    db.execute(delete(User).where(User.id == test_user.id))
    db.commit()
    db.expire_all()

    assert db.get(Track, track_id) is None


def test_tier_in_use_cannot_be_deleted(db: Session, test_user: User):
    tier = SubscriptionTier(name="Premium", monthly_price=999)
    db.add(tier)
    db.commit()
    db.add(UserSubscription(user_id=test_user.id, tier_id=tier.id, status="active"))
    db.commit()

    with pytest.raises(ForeignKeyViolation):
        with translate_integrity_errors(db):
            db.execute(delete(SubscriptionTier).where(SubscriptionTier.id == tier.id))
            db.commit()

    assert db.get(SubscriptionTier, tier.id) is not None


def test_unused_tier_can_be_deleted(db: Session):
    tier = SubscriptionTier(name="Basic", monthly_price=0)
    db.add(tier)
    db.commit()

    db.execute(delete(SubscriptionTier).where(SubscriptionTier.id == tier.id))
    db.commit()

    assert db.query(SubscriptionTier).count() == 0


def test_deleting_a_party_removes_its_activity(db: Session, test_user: User, test_track: Track):
    party = ListeningParty(party_id="party-xyz", host_user_id=test_user.id, party_name="Friday")
    db.add(party)
    db.commit()

    poll = PartyVote(
        party_id=party.party_id, vote_type="skip", initiated_by_user_id=test_user.id, required_votes=3
    )
    db.add_all(
        [
            poll,
            PartyReaction(party_id=party.party_id, track_id=test_track.id, user_id=test_user.id, emoji="🙏"),
            PartySyncEvent(party_id=party.party_id, event_type="play", track_id=test_track.id, position=0),
        ]
    )
    db.commit()
    db.add(PartyUserVote(vote_id=poll.id, user_id=test_user.id, vote="for"))
    db.commit()

    db.execute(delete(ListeningParty).where(ListeningParty.party_id == "party-xyz"))
    db.commit()
    db.expire_all()

    assert db.query(PartyVote).count() == 0
    assert db.query(PartyUserVote).count() == 0
    assert db.query(PartyReaction).count() == 0
    assert db.query(PartySyncEvent).count() == 0
    assert db.get(Track, test_track.id) is not None


def test_sync_event_outlives_its_track(db: Session, test_user: User, test_track: Track):
    party = ListeningParty(party_id="party-sync", host_user_id=test_user.id, party_name="Sync")
    db.add(party)
    db.commit()
    event = PartySyncEvent(party_id=party.party_id, event_type="seek", track_id=test_track.id, position=42)
    db.add(event)
    db.commit()
    event_id = event.id

    db.execute(delete(Track).where(Track.id == test_track.id))
    db.commit()
    db.expire_all()

    survivor = db.get(PartySyncEvent, event_id)
    assert survivor is not None
    assert survivor.track_id is None
    assert survivor.position == 42


def test_deleting_a_stripe_customer(db: Session, test_user: User):
    now = datetime.now(timezone.utc)
    db.add(StripeCustomer(user_id=test_user.id, stripe_customer_id="cus_123", email="test@example.com"))
    db.commit()
    db.add(
        StripeSubscription(
            user_id=test_user.id,
            stripe_subscription_id="sub_123",
            stripe_customer_id="cus_123",
            price_id="price_123",
            status="active",
            current_period_start=now,
            current_period_end=now + timedelta(days=30),
        )
    )
    db.commit()
    invoice = StripeInvoice(
        user_id=test_user.id,
        stripe_invoice_id="in_123",
        stripe_subscription_id="sub_123",
        amount=999,
        status="paid",
    )
    db.add(invoice)
    db.commit()
    invoice_id = invoice.id

    db.execute(delete(StripeCustomer).where(StripeCustomer.stripe_customer_id == "cus_123"))
    db.commit()
    db.expire_all()

    assert db.query(StripeSubscription).count() == 0
    kept = db.get(StripeInvoice, invoice_id)
    assert kept is not None
    assert kept.stripe_subscription_id is None
    assert kept.amount == 999


def test_deleting_a_review(db: Session, test_user: User, test_track: Track):
    review = TrackReview(user_id=test_user.id, track_id=test_track.id, rating=4, content="Lovely")
    db.add(review)
    db.commit()
    db.add_all(
        [
            ArtistResponse(review_id=review.id, artist_id=test_user.id, content="Thank you"),
            MostHelpfulReview(artist_id=test_user.id, review_id=review.id, review_text="Lovely", rating=4),
        ]
    )
    db.commit()

    db.execute(delete(TrackReview).where(TrackReview.id == review.id))
    db.commit()
    db.expire_all()

    assert db.query(ArtistResponse).count() == 0
    highlight = db.query(MostHelpfulReview).one()
    assert highlight.review_id is None
    assert highlight.review_text == "Lovely"
