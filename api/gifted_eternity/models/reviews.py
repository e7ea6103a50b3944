from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    false,
    func,
)
from sqlalchemy.orm import relationship

from ..db import Base
from ..enums import ModerationStatus
from ..types import enum_type


# ============================================================================
# REVIEWS & RATINGS
# ============================================================================


class TrackReview(Base):
    """User review of a track. One per user per track."""

    __tablename__ = "trackReviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    track_id = Column(
        "trackId", Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rating = Column(Integer, nullable=False)  # 1-5 stars
    title = Column(String(255), nullable=True)
    content = Column(Text, nullable=True)
    helpful = Column(Integer, nullable=False, server_default="0")  # helpful vote count
    unhelpful = Column(Integer, nullable=False, server_default="0")
    is_verified_purchase = Column(
        "isVerifiedPurchase", Boolean, nullable=False, server_default=false()
    )
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    user = relationship("User")
    track = relationship("Track")
    response = relationship(
        "ArtistResponse",
        back_populates="review",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (UniqueConstraint("userId", "trackId", name="userTrackUnique"),)


class TrackRating(Base):
    """Aggregate rating for a track, recomputed outside this package. One per track."""

    __tablename__ = "trackRatings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    track_id = Column(
        "trackId", Integer, ForeignKey("tracks.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    average_rating = Column("averageRating", String(4), nullable=False)  # e.g. "4.5"
    total_reviews = Column("totalReviews", Integer, nullable=False, server_default="0")
    five_star_count = Column("fiveStarCount", Integer, nullable=False, server_default="0")
    four_star_count = Column("fourStarCount", Integer, nullable=False, server_default="0")
    three_star_count = Column("threeStarCount", Integer, nullable=False, server_default="0")
    two_star_count = Column("twoStarCount", Integer, nullable=False, server_default="0")
    one_star_count = Column("oneStarCount", Integer, nullable=False, server_default="0")
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class ReviewHelpfulnessVote(Base):
    """A user's helpful/unhelpful vote on a review. One per user per review."""

    __tablename__ = "reviewHelpfulnessVotes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    review_id = Column(
        "reviewId", Integer, ForeignKey("trackReviews.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    is_helpful = Column("isHelpful", Boolean, nullable=False)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (UniqueConstraint("userId", "reviewId", name="userReviewUnique"),)


class AlbumReview(Base):
    """User review of an album. One per user per album."""

    __tablename__ = "albumReviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    album_id = Column(
        "albumId", Integer, ForeignKey("albums.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rating = Column(Integer, nullable=False)  # 1-5 stars
    title = Column(String(255), nullable=True)
    content = Column(Text, nullable=True)
    helpful = Column(Integer, nullable=False, server_default="0")
    unhelpful = Column(Integer, nullable=False, server_default="0")
    is_verified_purchase = Column(
        "isVerifiedPurchase", Boolean, nullable=False, server_default=false()
    )
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (UniqueConstraint("userId", "albumId", name="userAlbumUnique"),)


class ArtistResponse(Base):
    """Artist reply to a track review. At most one per review."""

    __tablename__ = "artistResponses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    review_id = Column(
        "reviewId",
        Integer,
        ForeignKey("trackReviews.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    artist_id = Column(
        "artistId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content = Column(Text, nullable=False)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    review = relationship("TrackReview", back_populates="response")


# ============================================================================
# MODERATION & BADGES
# ============================================================================


class ReviewModeration(Base):
    """Flag raised against a review and the moderator's handling of it."""

    __tablename__ = "reviewModeration"

    id = Column(Integer, primary_key=True, autoincrement=True)
    review_id = Column(
        "reviewId", Integer, ForeignKey("trackReviews.id", ondelete="CASCADE"), nullable=False, index=True
    )
    flagged_by = Column(
        "flaggedBy", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    reason = Column(String(255), nullable=False)  # spam, offensive, irrelevant
    description = Column(Text, nullable=True)
    status = Column(
        enum_type(ModerationStatus, "ck_reviewModeration_status"),
        nullable=False,
        server_default=ModerationStatus.PENDING.value,
    )
    moderator_notes = Column("moderatorNotes", Text, nullable=True)
    # Decision is kept when the moderator account is deleted
    reviewed_by = Column(
        "reviewedBy", Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    reviewed_at = Column("reviewedAt", DateTime(timezone=True), nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class ListenerBadge(Base):
    """Achievement badge for active community members."""

    __tablename__ = "listenerBadges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    icon = Column(String(255), nullable=True)  # badge icon URL
    criteria = Column(String(255), nullable=False)  # e.g. "10_helpful_reviews"
    color = Column(String(7), nullable=True, server_default="#9333ea")
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())


class UserBadgeAssignment(Base):
    """Badge earned by a user."""

    __tablename__ = "userBadgeAssignments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    badge_id = Column(
        "badgeId", Integer, ForeignKey("listenerBadges.id", ondelete="CASCADE"), nullable=False, index=True
    )
    earned_at = Column("earnedAt", DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    badge = relationship("ListenerBadge")

    __table_args__ = (UniqueConstraint("userId", "badgeId", name="userBadgeUnique"),)


class BadgeCriteriaTracking(Base):
    """Progress toward earning a badge."""

    __tablename__ = "badgeCriteriaTracking"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    badge_id = Column(
        "badgeId", Integer, ForeignKey("listenerBadges.id", ondelete="CASCADE"), nullable=False, index=True
    )
    progress = Column(Integer, nullable=False, server_default="0")
    target = Column(Integer, nullable=False)
    last_updated = Column(
        "lastUpdated",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    __table_args__ = (UniqueConstraint("userId", "badgeId", name="userBadgeCriteriaUnique"),)
