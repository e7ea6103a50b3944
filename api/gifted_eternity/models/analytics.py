from __future__ import annotations

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    func,
)

from ..db import Base


# ============================================================================
# PLAYS & DOWNLOADS
# ============================================================================
# Engagement facts keep their row when the listener deletes their account;
# the user reference is nulled instead.


class TrackPlay(Base):
    __tablename__ = "trackPlays"

    id = Column(Integer, primary_key=True, autoincrement=True)
    music_upload_id = Column(
        "musicUploadId",
        Integer,
        ForeignKey("musicUploads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    played_at = Column("playedAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    duration = Column(Integer, nullable=True)  # seconds played
    device_type = Column("deviceType", String(50), nullable=True)  # mobile, desktop, tablet
    country = Column(String(2), nullable=True)  # ISO 3166-1 alpha-2


class TrackDownload(Base):
    __tablename__ = "trackDownloads"

    id = Column(Integer, primary_key=True, autoincrement=True)
    music_upload_id = Column(
        "musicUploadId",
        Integer,
        ForeignKey("musicUploads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    downloaded_at = Column(
        "downloadedAt", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    format = Column(String(20), nullable=True)  # mp3, wav, flac
    country = Column(String(2), nullable=True)


# ============================================================================
# PER-UPLOAD AGGREGATES
# ============================================================================


class DailyAnalyticsSummary(Base):
    """Per-upload daily rollup. One row per upload per day."""

    __tablename__ = "dailyAnalyticsSummary"

    id = Column(Integer, primary_key=True, autoincrement=True)
    music_upload_id = Column(
        "musicUploadId",
        Integer,
        ForeignKey("musicUploads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date = Column(Date, nullable=False)
    plays = Column(Integer, nullable=False, server_default="0")
    downloads = Column(Integer, nullable=False, server_default="0")
    unique_listeners = Column("uniqueListeners", Integer, nullable=False, server_default="0")
    total_duration = Column("totalDuration", Integer, nullable=False, server_default="0")  # seconds
    avg_duration = Column("avgDuration", Numeric(10, 2), nullable=True)  # seconds per play

    __table_args__ = (UniqueConstraint("musicUploadId", "date", name="uploadDateUnique"),)


class ListenerDemographic(Base):
    """Per-upload listener counts by country. One row per upload per country."""

    __tablename__ = "listenerDemographics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    music_upload_id = Column(
        "musicUploadId",
        Integer,
        ForeignKey("musicUploads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    country = Column(String(2), nullable=False)
    plays = Column(Integer, nullable=False, server_default="0")
    downloads = Column(Integer, nullable=False, server_default="0")
    unique_listeners = Column("uniqueListeners", Integer, nullable=False, server_default="0")
    last_updated = Column(
        "lastUpdated",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (UniqueConstraint("musicUploadId", "country", name="uploadCountryUnique"),)


class RevenueTracking(Base):
    """Revenue attributed to an upload, in cents."""

    __tablename__ = "revenueTracking"

    id = Column(Integer, primary_key=True, autoincrement=True)
    music_upload_id = Column(
        "musicUploadId",
        Integer,
        ForeignKey("musicUploads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    source = Column(String(50), nullable=False)  # paypal, spotify, apple_music
    amount = Column(Integer, nullable=False)
    currency = Column(String(3), nullable=False, server_default="USD")
    date = Column(Date, nullable=False)
    transaction_id = Column("transactionId", String(255), nullable=True)


# ============================================================================
# ARTIST DASHBOARD
# ============================================================================


class ArtistReviewTrend(Base):
    __tablename__ = "artistReviewTrends"

    id = Column(Integer, primary_key=True, autoincrement=True)
    artist_id = Column(
        "artistId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(Date, nullable=False)
    total_reviews = Column("totalReviews", Integer, nullable=False, server_default="0")
    average_rating = Column("averageRating", Numeric(3, 2), nullable=False, server_default="0.00")
    positive_reviews = Column("positiveReviews", Integer, nullable=False, server_default="0")
    negative_reviews = Column("negativeReviews", Integer, nullable=False, server_default="0")
    neutral_reviews = Column("neutralReviews", Integer, nullable=False, server_default="0")

    __table_args__ = (UniqueConstraint("artistId", "date", name="artistReviewDateUnique"),)


class ArtistListenerDemographic(Base):
    __tablename__ = "artistListenerDemographics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    artist_id = Column(
        "artistId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    age_group = Column("ageGroup", String(20), nullable=True)  # 13-17, 18-24, ..., 55+
    gender = Column(String(20), nullable=True)
    country = Column(String(2), nullable=True)
    listener_count = Column("listenerCount", Integer, nullable=False, server_default="0")
    play_count = Column("playCount", Integer, nullable=False, server_default="0")
    last_updated = Column(
        "lastUpdated",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class ArtistEngagementMetric(Base):
    __tablename__ = "artistEngagementMetrics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    artist_id = Column(
        "artistId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(Date, nullable=False)
    followers = Column(Integer, nullable=False, server_default="0")
    new_followers = Column("newFollowers", Integer, nullable=False, server_default="0")
    shares = Column(Integer, nullable=False, server_default="0")
    saves = Column(Integer, nullable=False, server_default="0")
    comments = Column(Integer, nullable=False, server_default="0")
    engagement_rate = Column("engagementRate", Numeric(5, 2), nullable=False, server_default="0.00")

    __table_args__ = (UniqueConstraint("artistId", "date", name="artistEngagementDateUnique"),)


class MostHelpfulReview(Base):
    """Denormalised copy of a highly rated review shown on the artist dashboard."""

    __tablename__ = "mostHelpfulReviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    artist_id = Column(
        "artistId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # The copied text outlives the source review
    review_id = Column(
        "reviewId", Integer, ForeignKey("trackReviews.id", ondelete="SET NULL"), nullable=True, index=True
    )
    reviewer_name = Column("reviewerName", String(255), nullable=True)
    review_text = Column("reviewText", String(1000), nullable=True)
    rating = Column(Integer, nullable=True)  # 1-5
    helpful_count = Column("helpfulCount", Integer, nullable=False, server_default="0")
    unhelpful_count = Column("unhelpfulCount", Integer, nullable=False, server_default="0")
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
