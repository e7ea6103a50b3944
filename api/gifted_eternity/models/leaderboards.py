"""Community leaderboard snapshots.

Rows are written wholesale by the ranking job for a period; nothing here
computes ranks.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    func,
)

from ..db import Base
from ..enums import LeaderboardPeriod
from ..types import enum_type


def _period_column(table: str) -> Column:
    return Column(
        enum_type(LeaderboardPeriod, f"ck_{table}_period"),
        nullable=False,
        server_default=LeaderboardPeriod.WEEKLY.value,
    )


def _updated_at_column() -> Column:
    return Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class TopReviewersLeaderboard(Base):
    __tablename__ = "topReviewersLeaderboard"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_name = Column("userName", String(255), nullable=False)
    user_avatar = Column("userAvatar", String(500), nullable=True)
    review_count = Column("reviewCount", Integer, nullable=False, server_default="0")
    helpful_count = Column("helpfulCount", Integer, nullable=False, server_default="0")
    average_rating = Column("averageRating", Numeric(3, 2), nullable=False, server_default="0.00")
    rank = Column(Integer, nullable=False)
    period = _period_column("topReviewersLeaderboard")
    week_start_date = Column("weekStartDate", Date, nullable=True)
    updated_at = _updated_at_column()


class MostHelpfulCommentsLeaderboard(Base):
    __tablename__ = "mostHelpfulCommentsLeaderboard"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_name = Column("userName", String(255), nullable=False)
    comment_count = Column("commentCount", Integer, nullable=False, server_default="0")
    total_helpful = Column("totalHelpful", Integer, nullable=False, server_default="0")
    helpful_rate = Column("helpfulRate", Numeric(5, 2), nullable=False, server_default="0.00")
    rank = Column(Integer, nullable=False)
    period = _period_column("mostHelpfulCommentsLeaderboard")
    week_start_date = Column("weekStartDate", Date, nullable=True)
    updated_at = _updated_at_column()


class TrendingTracksLeaderboard(Base):
    __tablename__ = "trendingTracksLeaderboard"

    id = Column(Integer, primary_key=True, autoincrement=True)
    music_upload_id = Column(
        "musicUploadId",
        Integer,
        ForeignKey("musicUploads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    track_title = Column("trackTitle", String(255), nullable=False)
    artist_name = Column("artistName", String(255), nullable=False)
    plays = Column(Integer, nullable=False, server_default="0")
    new_plays = Column("newPlays", Integer, nullable=False, server_default="0")
    downloads = Column(Integer, nullable=False, server_default="0")
    shares = Column(Integer, nullable=False, server_default="0")
    saves = Column(Integer, nullable=False, server_default="0")
    trending_score = Column("trendingScore", Numeric(8, 2), nullable=False, server_default="0.00")
    rank = Column(Integer, nullable=False)
    period = _period_column("trendingTracksLeaderboard")
    week_start_date = Column("weekStartDate", Date, nullable=True)
    updated_at = _updated_at_column()


class TrendingArtistsLeaderboard(Base):
    __tablename__ = "trendingArtistsLeaderboard"

    id = Column(Integer, primary_key=True, autoincrement=True)
    artist_id = Column(
        "artistId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    artist_name = Column("artistName", String(255), nullable=False)
    artist_avatar = Column("artistAvatar", String(500), nullable=True)
    followers = Column(Integer, nullable=False, server_default="0")
    new_followers = Column("newFollowers", Integer, nullable=False, server_default="0")
    total_plays = Column("totalPlays", Integer, nullable=False, server_default="0")
    new_plays = Column("newPlays", Integer, nullable=False, server_default="0")
    trending_score = Column("trendingScore", Numeric(8, 2), nullable=False, server_default="0.00")
    rank = Column(Integer, nullable=False)
    period = _period_column("trendingArtistsLeaderboard")
    week_start_date = Column("weekStartDate", Date, nullable=True)
    updated_at = _updated_at_column()
