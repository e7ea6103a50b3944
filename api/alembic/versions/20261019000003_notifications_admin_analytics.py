"""notifications, admin access control, analytics and community leaderboards

Revision ID: 20261019000003
Revises: 20261019000002
Create Date: 2026-10-19
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019000003"
down_revision: str | None = "20261019000002"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

LEADERBOARD_PERIODS = ("weekly", "monthly", "alltime")


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True)


def _now(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def _fk(name: str, target: str, *, ondelete: str = "CASCADE") -> sa.Column:
    return sa.Column(
        name,
        sa.Integer(),
        sa.ForeignKey(target, ondelete=ondelete),
        nullable=ondelete == "SET NULL",
        index=True,
    )


def _counter(name: str) -> sa.Column:
    return sa.Column(name, sa.Integer(), nullable=False, server_default="0")


def _decimal(name: str, precision: int, scale: int = 2) -> sa.Column:
    return sa.Column(name, sa.Numeric(precision, scale), nullable=False, server_default="0.00")


def _flag(name: str, default: bool) -> sa.Column:
    return sa.Column(
        name, sa.Boolean(), nullable=False, server_default=sa.true() if default else sa.false()
    )


def _period(table: str) -> sa.Column:
    return sa.Column(
        "period",
        _enum(f"ck_{table}_period", *LEADERBOARD_PERIODS),
        nullable=False,
        server_default="weekly",
    )


def upgrade() -> None:
    # ========================================================================
    # NOTIFICATIONS
    # ========================================================================

    op.create_table(
        "notifications",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        sa.Column(
            "type",
            _enum(
                "ck_notifications_type",
                "review_response",
                "badge_earned",
                "new_release",
                "collaboration_invite",
                "comment_reply",
                "follow",
                "mention",
                "message",
            ),
            nullable=False,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("message", sa.String(500), nullable=False),
        sa.Column("relatedId", sa.Integer(), nullable=True),
        sa.Column("relatedType", sa.String(50), nullable=True),
        _flag("isRead", False),
        _now("createdAt"),
        sa.Column("readAt", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "notificationPreferences",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _flag("reviewResponses", True),
        _flag("badgesEarned", True),
        _flag("newReleases", True),
        _flag("collaborationInvites", True),
        _flag("commentReplies", True),
        _flag("follows", True),
        _flag("mentions", True),
        _flag("messages", True),
        _flag("emailNotifications", False),
        _flag("pushNotifications", True),
        _now("updatedAt"),
    )

    op.create_table(
        "emailNotifications",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        sa.Column(
            "type",
            _enum(
                "ck_emailNotifications_type",
                "new_track",
                "artist_update",
                "playlist_shared",
                "comment_reply",
                "new_follower",
            ),
            nullable=False,
        ),
        sa.Column("subject", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("relatedId", sa.Integer(), nullable=True),
        _flag("sent", False),
        sa.Column("sentAt", sa.DateTime(timezone=True), nullable=True),
        _now("createdAt"),
    )

    op.create_table(
        "pushTokens",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        sa.Column("token", sa.String(512), unique=True, nullable=False),
        sa.Column("platform", _enum("ck_pushTokens_platform", "ios", "android", "web"), nullable=False),
        _now("createdAt"),
        sa.Column("lastUsedAt", sa.DateTime(timezone=True), nullable=True),
    )

    # ========================================================================
    # ADMIN ACCESS CONTROL
    # ========================================================================

    op.create_table(
        "adminUsers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        sa.Column("email", sa.String(255), unique=True, nullable=False),
        sa.Column("gmailId", sa.String(255), unique=True, nullable=True),
        sa.Column("passcodeHash", sa.String(255), nullable=True),
        _flag("passcodeVerified", False),
        sa.Column("verificationCode", sa.String(6), nullable=True),
        sa.Column("verificationCodeExpiry", sa.DateTime(timezone=True), nullable=True),
        sa.Column("lastLogin", sa.DateTime(timezone=True), nullable=True),
        _flag("isActive", True),
        _now("createdAt"),
        _now("updatedAt"),
    )

    op.create_table(
        "adminSessions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("adminId", "adminUsers.id"),
        sa.Column("sessionToken", sa.String(255), unique=True, nullable=False),
        sa.Column("ipAddress", sa.String(45), nullable=True),
        sa.Column("userAgent", sa.String(500), nullable=True),
        sa.Column("expiresAt", sa.DateTime(timezone=True), nullable=False),
        _now("createdAt"),
    )

    op.create_table(
        "adminActivityLog",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("adminId", "adminUsers.id"),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("entityType", sa.String(50), nullable=True),
        sa.Column("entityId", sa.Integer(), nullable=True),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("ipAddress", sa.String(45), nullable=True),
        _now("timestamp"),
    )

    op.create_table(
        "adminPermissions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("adminId", "adminUsers.id"),
        sa.Column("permission", sa.String(100), nullable=False),
        _now("grantedAt"),
    )

    op.create_table(
        "adminSettings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("adminId", "adminUsers.id"),
        sa.Column("settingKey", sa.String(100), nullable=False),
        sa.Column("settingValue", sa.Text(), nullable=True),
        _now("updatedAt"),
    )

    # ========================================================================
    # ANALYTICS
    # ========================================================================

    op.create_table(
        "trackPlays",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("musicUploadId", "musicUploads.id"),
        _fk("userId", "users.id", ondelete="SET NULL"),
        _now("playedAt"),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("deviceType", sa.String(50), nullable=True),
        sa.Column("country", sa.String(2), nullable=True),
    )

    op.create_table(
        "trackDownloads",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("musicUploadId", "musicUploads.id"),
        _fk("userId", "users.id", ondelete="SET NULL"),
        _now("downloadedAt"),
        sa.Column("format", sa.String(20), nullable=True),
        sa.Column("country", sa.String(2), nullable=True),
    )

    op.create_table(
        "dailyAnalyticsSummary",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("musicUploadId", "musicUploads.id"),
        sa.Column("date", sa.Date(), nullable=False),
        _counter("plays"),
        _counter("downloads"),
        _counter("uniqueListeners"),
        _counter("totalDuration"),
        sa.Column("avgDuration", sa.Numeric(10, 2), nullable=True),
        sa.UniqueConstraint("musicUploadId", "date", name="uploadDateUnique"),
    )

    op.create_table(
        "listenerDemographics",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("musicUploadId", "musicUploads.id"),
        sa.Column("country", sa.String(2), nullable=False),
        _counter("plays"),
        _counter("downloads"),
        _counter("uniqueListeners"),
        _now("lastUpdated"),
        sa.UniqueConstraint("musicUploadId", "country", name="uploadCountryUnique"),
    )

    op.create_table(
        "revenueTracking",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("musicUploadId", "musicUploads.id"),
        sa.Column("source", sa.String(50), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False, server_default="USD"),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("transactionId", sa.String(255), nullable=True),
    )

    op.create_table(
        "artistReviewTrends",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("artistId", "users.id"),
        sa.Column("date", sa.Date(), nullable=False),
        _counter("totalReviews"),
        _decimal("averageRating", 3),
        _counter("positiveReviews"),
        _counter("negativeReviews"),
        _counter("neutralReviews"),
        sa.UniqueConstraint("artistId", "date", name="artistReviewDateUnique"),
    )

    op.create_table(
        "artistListenerDemographics",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("artistId", "users.id"),
        sa.Column("ageGroup", sa.String(20), nullable=True),
        sa.Column("gender", sa.String(20), nullable=True),
        sa.Column("country", sa.String(2), nullable=True),
        _counter("listenerCount"),
        _counter("playCount"),
        _now("lastUpdated"),
    )

    op.create_table(
        "artistEngagementMetrics",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("artistId", "users.id"),
        sa.Column("date", sa.Date(), nullable=False),
        _counter("followers"),
        _counter("newFollowers"),
        _counter("shares"),
        _counter("saves"),
        _counter("comments"),
        _decimal("engagementRate", 5),
        sa.UniqueConstraint("artistId", "date", name="artistEngagementDateUnique"),
    )

    op.create_table(
        "mostHelpfulReviews",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("artistId", "users.id"),
        _fk("reviewId", "trackReviews.id", ondelete="SET NULL"),
        sa.Column("reviewerName", sa.String(255), nullable=True),
        sa.Column("reviewText", sa.String(1000), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        _counter("helpfulCount"),
        _counter("unhelpfulCount"),
        _now("createdAt"),
    )

    # ========================================================================
    # COMMUNITY LEADERBOARDS
    # ========================================================================

    op.create_table(
        "topReviewersLeaderboard",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        sa.Column("userName", sa.String(255), nullable=False),
        sa.Column("userAvatar", sa.String(500), nullable=True),
        _counter("reviewCount"),
        _counter("helpfulCount"),
        _decimal("averageRating", 3),
        sa.Column("rank", sa.Integer(), nullable=False),
        _period("topReviewersLeaderboard"),
        sa.Column("weekStartDate", sa.Date(), nullable=True),
        _now("updatedAt"),
    )

    op.create_table(
        "mostHelpfulCommentsLeaderboard",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        sa.Column("userName", sa.String(255), nullable=False),
        _counter("commentCount"),
        _counter("totalHelpful"),
        _decimal("helpfulRate", 5),
        sa.Column("rank", sa.Integer(), nullable=False),
        _period("mostHelpfulCommentsLeaderboard"),
        sa.Column("weekStartDate", sa.Date(), nullable=True),
        _now("updatedAt"),
    )

    op.create_table(
        "trendingTracksLeaderboard",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("musicUploadId", "musicUploads.id"),
        sa.Column("trackTitle", sa.String(255), nullable=False),
        sa.Column("artistName", sa.String(255), nullable=False),
        _counter("plays"),
        _counter("newPlays"),
        _counter("downloads"),
        _counter("shares"),
        _counter("saves"),
        _decimal("trendingScore", 8),
        sa.Column("rank", sa.Integer(), nullable=False),
        _period("trendingTracksLeaderboard"),
        sa.Column("weekStartDate", sa.Date(), nullable=True),
        _now("updatedAt"),
    )

    op.create_table(
        "trendingArtistsLeaderboard",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("artistId", "users.id"),
        sa.Column("artistName", sa.String(255), nullable=False),
        sa.Column("artistAvatar", sa.String(500), nullable=True),
        _counter("followers"),
        _counter("newFollowers"),
        _counter("totalPlays"),
        _counter("newPlays"),
        _decimal("trendingScore", 8),
        sa.Column("rank", sa.Integer(), nullable=False),
        _period("trendingArtistsLeaderboard"),
        sa.Column("weekStartDate", sa.Date(), nullable=True),
        _now("updatedAt"),
    )


def downgrade() -> None:
    for table in (
        "trendingArtistsLeaderboard",
        "trendingTracksLeaderboard",
        "mostHelpfulCommentsLeaderboard",
        "topReviewersLeaderboard",
        "mostHelpfulReviews",
        "artistEngagementMetrics",
        "artistListenerDemographics",
        "artistReviewTrends",
        "revenueTracking",
        "listenerDemographics",
        "dailyAnalyticsSummary",
        "trackDownloads",
        "trackPlays",
        "adminSettings",
        "adminPermissions",
        "adminActivityLog",
        "adminSessions",
        "adminUsers",
        "pushTokens",
        "emailNotifications",
        "notificationPreferences",
        "notifications",
    ):
        op.drop_table(table)
