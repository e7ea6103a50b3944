from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    false,
    func,
)

from ..db import Base
from ..enums import ActivityType, SharePlatform
from ..types import enum_type


# ============================================================================
# LISTENING & FAVORITES
# ============================================================================


class Favorite(Base):
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    track_id = Column(
        "trackId", Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (UniqueConstraint("userId", "trackId", name="userTrackFavoriteUnique"),)


class StreamHistory(Base):
    """One stream of a track, for analytics."""

    __tablename__ = "streamHistory"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    track_id = Column(
        "trackId", Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    seconds_played = Column("secondsPlayed", Integer, nullable=False)
    completed = Column(Boolean, nullable=False, server_default=false())
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())


class UserListeningHistory(Base):
    __tablename__ = "userListeningHistory"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    track_id = Column(
        "trackId", Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    listened_at = Column("listenedAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    duration = Column(Integer, nullable=True)  # seconds listened
    completed = Column(Boolean, nullable=False, server_default=false())


class UserFavorite(Base):
    __tablename__ = "userFavorites"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    track_id = Column(
        "trackId", Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    favorited_at = Column("favoritedAt", DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (UniqueConstraint("userId", "trackId", name="userTrackUserFavoriteUnique"),)


# ============================================================================
# SHARING
# ============================================================================


class Share(Base):
    """Social share of a track or playlist."""

    __tablename__ = "shares"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    track_id = Column(
        "trackId", Integer, ForeignKey("tracks.id", ondelete="SET NULL"), nullable=True, index=True
    )
    playlist_id = Column(
        "playlistId",
        Integer,
        ForeignKey("userPlaylists.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    platform = Column(String(64), nullable=False)  # twitter, facebook, whatsapp, instagram, tiktok
    shared_url = Column("sharedUrl", String(512), nullable=True)
    shared_at = Column("sharedAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())


class ShareAnalytic(Base):
    """Click-through counters for a share."""

    __tablename__ = "shareAnalytics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    share_id = Column(
        "shareId", Integer, ForeignKey("shares.id", ondelete="CASCADE"), nullable=False, index=True
    )
    clicks = Column(Integer, nullable=False, server_default="0")
    impressions = Column(Integer, nullable=False, server_default="0")
    conversions = Column(Integer, nullable=False, server_default="0")
    engagement_rate = Column("engagementRate", Integer, nullable=False, server_default="0")  # percent * 100
    platform = Column(String(64), nullable=False)
    tracking_code = Column("trackingCode", String(255), nullable=True)
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())


class ShareEvent(Base):
    __tablename__ = "shareEvents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    track_id = Column(
        "trackId", Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    platform = Column(enum_type(SharePlatform, "ck_shareEvents_platform"), nullable=False)
    shared_at = Column("sharedAt", DateTime(timezone=True), nullable=False, server_default=func.now())


# ============================================================================
# SOCIAL GRAPH & FEED
# ============================================================================


class UserFollow(Base):
    """User following relationship."""

    __tablename__ = "userFollows"

    id = Column(Integer, primary_key=True, autoincrement=True)
    follower_id = Column(
        "followerId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    following_id = Column(
        "followingId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    followed_at = Column("followedAt", DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("followerId", "followingId", name="followerFollowingUnique"),
    )


class ActivityFeedItem(Base):
    """Feed entry. Related user/track are dropped, not the entry, when they go away."""

    __tablename__ = "activityFeed"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(enum_type(ActivityType, "ck_activityFeed_type"), nullable=False)
    related_user_id = Column(
        "relatedUserId", Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    related_track_id = Column(
        "relatedTrackId", Integer, ForeignKey("tracks.id", ondelete="SET NULL"), nullable=True, index=True
    )
    message = Column(String(512), nullable=False)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
