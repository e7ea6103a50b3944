"""gamification: achievements, leaderboards, challenges, listening stats and preferences

Revision ID: 20261019000005
Revises: 20261019000004
Create Date: 2026-10-19
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019000005"
down_revision: str | None = "20261019000004"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True)


def _ts(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def _owner(*, unique: bool = False) -> sa.Column:
    return sa.Column(
        "user_id",
        sa.Integer(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        unique=unique,
        nullable=False,
    )


def _counter(name: str, default: str = "0") -> sa.Column:
    return sa.Column(name, sa.Integer(), nullable=False, server_default=default)


def upgrade() -> None:
    # ========================================================================
    # PROFILE, ACHIEVEMENTS & MILESTONES
    # ========================================================================

    op.create_table(
        "user_gamification_profile",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(unique=True),
        _counter("total_points"),
        _counter("current_level", "1"),
        _counter("current_level_progress"),
        _counter("total_achievements"),
        _counter("current_streak"),
        _counter("longest_streak"),
        sa.Column("last_activity_date", sa.DateTime(timezone=True), nullable=True),
        _ts("created_at"),
        _ts("updated_at"),
    )

    op.create_table(
        "achievements",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.Text(), nullable=True),
        sa.Column(
            "category",
            _enum("ck_achievements_category", "listening", "social", "discovery", "engagement"),
            nullable=False,
        ),
        _counter("points_reward", "10"),
        sa.Column("condition", sa.Text(), nullable=False),
        sa.Column("is_hidden", sa.Boolean(), nullable=False, server_default=sa.false()),
        _ts("created_at"),
    )
    op.create_index("achievements_category_idx", "achievements", ["category"])

    op.create_table(
        "user_achievements",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column(
            "achievement_id",
            sa.Integer(),
            sa.ForeignKey("achievements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _ts("unlocked_at"),
        sa.Column("progress", sa.Integer(), nullable=True, server_default="0"),
        _ts("created_at"),
        sa.UniqueConstraint("user_id", "achievement_id", name="user_achievements_unique_idx"),
    )
    op.create_index("user_achievements_user_id_idx", "user_achievements", ["user_id"])
    op.create_index("user_achievements_achievement_id_idx", "user_achievements", ["achievement_id"])

    op.create_table(
        "leaderboards",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("rank", sa.Integer(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column(
            "leaderboard_type",
            _enum("ck_leaderboards_leaderboard_type", "all_time", "monthly", "weekly"),
            nullable=False,
        ),
        sa.Column("period", sa.Text(), nullable=False),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("leaderboards_user_id_idx", "leaderboards", ["user_id"])
    op.create_index("leaderboards_type_idx", "leaderboards", ["leaderboard_type"])
    op.create_index("leaderboards_period_idx", "leaderboards", ["period"])

    op.create_table(
        "user_milestones",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column(
            "milestone_type",
            _enum(
                "ck_user_milestones_milestone_type",
                "first_listen",
                "plays_100",
                "plays_1000",
                "anniversary",
                "follower_milestone",
            ),
            nullable=False,
        ),
        sa.Column("milestone_value", sa.Integer(), nullable=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _ts("reached_at"),
        sa.Column("celebration_sent", sa.Boolean(), nullable=False, server_default=sa.false()),
        _ts("created_at"),
    )
    op.create_index("user_milestones_user_id_idx", "user_milestones", ["user_id"])
    op.create_index("user_milestones_type_idx", "user_milestones", ["milestone_type"])

    # ========================================================================
    # CHALLENGES
    # ========================================================================

    op.create_table(
        "social_challenges",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.Text(), nullable=True),
        sa.Column(
            "challenge_type",
            _enum("ck_social_challenges_challenge_type", "listen", "share", "invite", "create_playlist"),
            nullable=False,
        ),
        sa.Column("target", sa.Integer(), nullable=False),
        _counter("reward", "50"),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        _ts("created_at"),
    )
    op.create_index("social_challenges_type_idx", "social_challenges", ["challenge_type"])
    op.create_index("social_challenges_active_idx", "social_challenges", ["is_active"])

    op.create_table(
        "user_challenge_progress",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column(
            "challenge_id",
            sa.Integer(),
            sa.ForeignKey("social_challenges.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _counter("progress"),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("reward_claimed", sa.Boolean(), nullable=False, server_default=sa.false()),
        _ts("created_at"),
        _ts("updated_at"),
        sa.UniqueConstraint("user_id", "challenge_id", name="user_challenge_progress_unique_idx"),
    )
    op.create_index("user_challenge_progress_user_id_idx", "user_challenge_progress", ["user_id"])
    op.create_index(
        "user_challenge_progress_challenge_id_idx", "user_challenge_progress", ["challenge_id"]
    )

    # ========================================================================
    # LISTENING STATS & RECOMMENDATIONS
    # ========================================================================

    op.create_table(
        "user_listening_stats",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("year", sa.Integer(), nullable=False),
        _counter("total_listening_minutes"),
        _counter("total_tracks_played"),
        _counter("unique_tracks_played"),
        _counter("unique_artists_played"),
        sa.Column("top_genre", sa.Text(), nullable=True),
        sa.Column("top_artist", sa.Text(), nullable=True),
        sa.Column("top_track", sa.Text(), nullable=True),
        sa.Column("average_listening_time", sa.Text(), nullable=True),
        sa.Column("most_active_day", sa.Text(), nullable=True),
        sa.Column("wrapped_generated", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("wrapped_generated_at", sa.DateTime(timezone=True), nullable=True),
        _ts("created_at"),
        _ts("updated_at"),
        sa.UniqueConstraint("user_id", "year", name="user_listening_stats_user_year_unique"),
    )
    op.create_index("user_listening_stats_user_id_idx", "user_listening_stats", ["user_id"])
    op.create_index("user_listening_stats_year_idx", "user_listening_stats", ["year"])

    op.create_table(
        "user_listening_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column(
            "track_id", sa.Integer(), sa.ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column(
            "artist_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column("genre", sa.Text(), nullable=True),
        sa.Column("mood", sa.Text(), nullable=True),
        _ts("played_at"),
        sa.Column("listen_duration", sa.Integer(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        _ts("created_at"),
    )
    op.create_index("user_listening_history_user_id_idx", "user_listening_history", ["user_id"])
    op.create_index("user_listening_history_track_id_idx", "user_listening_history", ["track_id"])
    op.create_index("user_listening_history_played_at_idx", "user_listening_history", ["played_at"])

    op.create_table(
        "user_preferences",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(unique=True),
        sa.Column("preferred_genres", sa.Text(), nullable=True),
        sa.Column("preferred_moods", sa.Text(), nullable=True),
        sa.Column("preferred_artists", sa.Text(), nullable=True),
        sa.Column("disliked_genres", sa.Text(), nullable=True),
        sa.Column(
            "notification_frequency",
            _enum("ck_user_preferences_notification_frequency", "daily", "weekly", "never"),
            nullable=True,
            server_default="daily",
        ),
        sa.Column(
            "recommendation_style",
            _enum("ck_user_preferences_recommendation_style", "discovery", "familiar", "balanced"),
            nullable=True,
            server_default="balanced",
        ),
        _ts("created_at"),
        _ts("updated_at"),
    )


def downgrade() -> None:
    for table in (
        "user_preferences",
        "user_listening_history",
        "user_listening_stats",
        "user_challenge_progress",
        "social_challenges",
        "user_milestones",
        "leaderboards",
        "user_achievements",
        "achievements",
        "user_gamification_profile",
    ):
        op.drop_table(table)
