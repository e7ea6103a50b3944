from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
    UniqueConstraint,
    false,
    func,
    true,
)
from sqlalchemy.orm import relationship

from ..db import Base
from ..enums import (
    AchievementCategory,
    ChallengeType,
    LeaderboardType,
    MilestoneType,
    NotificationFrequency,
    RecommendationStyle,
)
from ..types import enum_type


def _created_at() -> Column:
    return Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now())


def _updated_at() -> Column:
    return Column(
        "updated_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


# ============================================================================
# PROFILE, ACHIEVEMENTS & MILESTONES
# ============================================================================


class UserGamificationProfile(Base):
    """Points, level and streak counters. One per user."""

    __tablename__ = "user_gamification_profile"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    total_points = Column(Integer, nullable=False, server_default="0")
    current_level = Column(Integer, nullable=False, server_default="1")
    current_level_progress = Column(Integer, nullable=False, server_default="0")
    total_achievements = Column(Integer, nullable=False, server_default="0")
    current_streak = Column(Integer, nullable=False, server_default="0")  # days in a row
    longest_streak = Column(Integer, nullable=False, server_default="0")
    last_activity_date = Column(DateTime(timezone=True), nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()

    # Relationships (joined on user_id; rows are owned by the user, not the profile)
    user_achievements = relationship(
        "UserAchievement",
        primaryjoin="UserGamificationProfile.user_id == foreign(UserAchievement.user_id)",
        viewonly=True,
    )
    milestones = relationship(
        "UserMilestone",
        primaryjoin="UserGamificationProfile.user_id == foreign(UserMilestone.user_id)",
        viewonly=True,
    )
    challenge_progress = relationship(
        "UserChallengeProgress",
        primaryjoin="UserGamificationProfile.user_id == foreign(UserChallengeProgress.user_id)",
        viewonly=True,
    )


class Achievement(Base):
    __tablename__ = "achievements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    icon = Column(Text, nullable=True)  # URL or emoji
    category = Column(enum_type(AchievementCategory, "ck_achievements_category"), nullable=False)
    points_reward = Column(Integer, nullable=False, server_default="10")
    condition = Column(Text, nullable=False)  # JSON unlock condition
    is_hidden = Column(Boolean, nullable=False, server_default=false())
    created_at = _created_at()

    # Relationships
    user_achievements = relationship(
        "UserAchievement",
        back_populates="achievement",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (Index("achievements_category_idx", "category"),)


class UserAchievement(Base):
    """Achievement unlocked by a user. One per user per achievement."""

    __tablename__ = "user_achievements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    achievement_id = Column(
        Integer, ForeignKey("achievements.id", ondelete="CASCADE"), nullable=False
    )
    unlocked_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    progress = Column(Integer, nullable=True, server_default="0")  # multi-step achievements
    created_at = _created_at()

    achievement = relationship("Achievement", back_populates="user_achievements")

    __table_args__ = (
        Index("user_achievements_user_id_idx", "user_id"),
        Index("user_achievements_achievement_id_idx", "achievement_id"),
        UniqueConstraint("user_id", "achievement_id", name="user_achievements_unique_idx"),
    )


class Leaderboard(Base):
    """Per-user score snapshot for a leaderboard period."""

    __tablename__ = "leaderboards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    rank = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False)
    leaderboard_type = Column(
        enum_type(LeaderboardType, "ck_leaderboards_leaderboard_type"), nullable=False
    )
    period = Column(Text, nullable=False)  # YYYY-MM for monthly, YYYY-Www for weekly
    created_at = _created_at()
    updated_at = _updated_at()

    __table_args__ = (
        Index("leaderboards_user_id_idx", "user_id"),
        Index("leaderboards_type_idx", "leaderboard_type"),
        Index("leaderboards_period_idx", "period"),
    )


class UserMilestone(Base):
    __tablename__ = "user_milestones"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    milestone_type = Column(
        enum_type(MilestoneType, "ck_user_milestones_milestone_type"), nullable=False
    )
    milestone_value = Column(Integer, nullable=True)  # e.g. 100 for plays_100
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    reached_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    celebration_sent = Column(Boolean, nullable=False, server_default=false())
    created_at = _created_at()

    __table_args__ = (
        Index("user_milestones_user_id_idx", "user_id"),
        Index("user_milestones_type_idx", "milestone_type"),
    )


# ============================================================================
# CHALLENGES
# ============================================================================


class SocialChallenge(Base):
    __tablename__ = "social_challenges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    icon = Column(Text, nullable=True)
    challenge_type = Column(
        enum_type(ChallengeType, "ck_social_challenges_challenge_type"), nullable=False
    )
    target = Column(Integer, nullable=False)  # e.g. 10 for "listen to 10 songs"
    reward = Column(Integer, nullable=False, server_default="50")  # points
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    is_active = Column(Boolean, nullable=False, server_default=true())
    created_at = _created_at()

    # Relationships
    user_progress = relationship(
        "UserChallengeProgress",
        back_populates="challenge",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("social_challenges_type_idx", "challenge_type"),
        Index("social_challenges_active_idx", "is_active"),
    )


class UserChallengeProgress(Base):
    """Progress on a challenge. One per user per challenge."""

    __tablename__ = "user_challenge_progress"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    challenge_id = Column(
        Integer, ForeignKey("social_challenges.id", ondelete="CASCADE"), nullable=False
    )
    progress = Column(Integer, nullable=False, server_default="0")
    completed = Column(Boolean, nullable=False, server_default=false())
    completed_at = Column(DateTime(timezone=True), nullable=True)
    reward_claimed = Column(Boolean, nullable=False, server_default=false())
    created_at = _created_at()
    updated_at = _updated_at()

    challenge = relationship("SocialChallenge", back_populates="user_progress")

    __table_args__ = (
        Index("user_challenge_progress_user_id_idx", "user_id"),
        Index("user_challenge_progress_challenge_id_idx", "challenge_id"),
        UniqueConstraint("user_id", "challenge_id", name="user_challenge_progress_unique_idx"),
    )


# ============================================================================
# LISTENING STATS & RECOMMENDATIONS
# ============================================================================


class UserListeningStats(Base):
    """Yearly listening summary used for Wrapped. One per user per year."""

    __tablename__ = "user_listening_stats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    year = Column(Integer, nullable=False)
    total_listening_minutes = Column(Integer, nullable=False, server_default="0")
    total_tracks_played = Column(Integer, nullable=False, server_default="0")
    unique_tracks_played = Column(Integer, nullable=False, server_default="0")
    unique_artists_played = Column(Integer, nullable=False, server_default="0")
    top_genre = Column(Text, nullable=True)
    top_artist = Column(Text, nullable=True)
    top_track = Column(Text, nullable=True)
    average_listening_time = Column(Text, nullable=True)  # time of day
    most_active_day = Column(Text, nullable=True)  # day of week
    wrapped_generated = Column(Boolean, nullable=False, server_default=false())
    wrapped_generated_at = Column(DateTime(timezone=True), nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()

    listening_history = relationship(
        "UserPlayEvent",
        primaryjoin="UserListeningStats.user_id == foreign(UserPlayEvent.user_id)",
        viewonly=True,
    )

    __table_args__ = (
        Index("user_listening_stats_user_id_idx", "user_id"),
        Index("user_listening_stats_year_idx", "year"),
        UniqueConstraint("user_id", "year", name="user_listening_stats_user_year_unique"),
    )


class UserPlayEvent(Base):
    """Play event feeding recommendations (distinct from the camelCase userListeningHistory table)."""

    __tablename__ = "user_listening_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    track_id = Column(Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False)
    artist_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    genre = Column(Text, nullable=True)
    mood = Column(Text, nullable=True)
    played_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    listen_duration = Column(Integer, nullable=True)  # seconds
    completed = Column(Boolean, nullable=False, server_default=false())
    created_at = _created_at()

    __table_args__ = (
        Index("user_listening_history_user_id_idx", "user_id"),
        Index("user_listening_history_track_id_idx", "track_id"),
        Index("user_listening_history_played_at_idx", "played_at"),
    )


class UserPreference(Base):
    """Recommendation preferences. List columns hold JSON arrays as text."""

    __tablename__ = "user_preferences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    preferred_genres = Column(Text, nullable=True)
    preferred_moods = Column(Text, nullable=True)
    preferred_artists = Column(Text, nullable=True)
    disliked_genres = Column(Text, nullable=True)
    notification_frequency = Column(
        enum_type(NotificationFrequency, "ck_user_preferences_notification_frequency"),
        nullable=True,
        server_default=NotificationFrequency.DAILY.value,
    )
    recommendation_style = Column(
        enum_type(RecommendationStyle, "ck_user_preferences_recommendation_style"),
        nullable=True,
        server_default=RecommendationStyle.BALANCED.value,
    )
    created_at = _created_at()
    updated_at = _updated_at()
