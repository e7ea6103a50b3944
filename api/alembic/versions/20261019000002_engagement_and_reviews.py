"""engagement, social graph, reviews and collaboration

Revision ID: 20261019000002
Revises: 20261019000001
Create Date: 2026-10-19
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019000002"
down_revision: str | None = "20261019000001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True)


def _now(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def _fk(name: str, target: str, *, ondelete: str = "CASCADE", unique: bool = False) -> sa.Column:
    """Integer reference column. SET NULL references are nullable, the rest are required."""
    return sa.Column(
        name,
        sa.Integer(),
        sa.ForeignKey(target, ondelete=ondelete),
        nullable=ondelete == "SET NULL",
        unique=unique,
        index=not unique,
    )


def upgrade() -> None:
    # ========================================================================
    # LISTENING & FAVORITES
    # ========================================================================

    op.create_table(
        "favorites",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("trackId", "tracks.id"),
        _now("createdAt"),
        sa.UniqueConstraint("userId", "trackId", name="userTrackFavoriteUnique"),
    )

    op.create_table(
        "streamHistory",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("trackId", "tracks.id"),
        sa.Column("secondsPlayed", sa.Integer(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        _now("createdAt"),
    )

    op.create_table(
        "userListeningHistory",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("trackId", "tracks.id"),
        _now("listenedAt"),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "userFavorites",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("trackId", "tracks.id"),
        _now("favoritedAt"),
        sa.UniqueConstraint("userId", "trackId", name="userTrackUserFavoriteUnique"),
    )

    # ========================================================================
    # SHARING
    # ========================================================================

    op.create_table(
        "shares",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("trackId", "tracks.id", ondelete="SET NULL"),
        _fk("playlistId", "userPlaylists.id", ondelete="SET NULL"),
        sa.Column("platform", sa.String(64), nullable=False),
        sa.Column("sharedUrl", sa.String(512), nullable=True),
        _now("sharedAt"),
        _now("createdAt"),
    )

    op.create_table(
        "shareAnalytics",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("shareId", "shares.id"),
        sa.Column("clicks", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("impressions", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("conversions", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("engagementRate", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("platform", sa.String(64), nullable=False),
        sa.Column("trackingCode", sa.String(255), nullable=True),
        _now("updatedAt"),
        _now("createdAt"),
    )

    op.create_table(
        "shareEvents",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("trackId", "tracks.id"),
        sa.Column(
            "platform",
            _enum(
                "ck_shareEvents_platform",
                "twitter",
                "facebook",
                "instagram",
                "whatsapp",
                "email",
                "link",
            ),
            nullable=False,
        ),
        _now("sharedAt"),
    )

    # ========================================================================
    # SOCIAL GRAPH & FEED
    # ========================================================================

    op.create_table(
        "userFollows",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("followerId", "users.id"),
        _fk("followingId", "users.id"),
        _now("followedAt"),
        sa.UniqueConstraint("followerId", "followingId", name="followerFollowingUnique"),
    )

    op.create_table(
        "activityFeed",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        sa.Column(
            "type",
            _enum("ck_activityFeed_type", "follow", "like", "comment", "share", "upload"),
            nullable=False,
        ),
        _fk("relatedUserId", "users.id", ondelete="SET NULL"),
        _fk("relatedTrackId", "tracks.id", ondelete="SET NULL"),
        sa.Column("message", sa.String(512), nullable=False),
        _now("createdAt"),
    )

    # ========================================================================
    # REVIEWS & RATINGS
    # ========================================================================

    op.create_table(
        "trackReviews",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("trackId", "tracks.id"),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("helpful", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("unhelpful", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("isVerifiedPurchase", sa.Boolean(), nullable=False, server_default=sa.false()),
        _now("createdAt"),
        _now("updatedAt"),
        sa.UniqueConstraint("userId", "trackId", name="userTrackUnique"),
    )

    op.create_table(
        "trackRatings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("trackId", "tracks.id", unique=True),
        sa.Column("averageRating", sa.String(4), nullable=False),
        sa.Column("totalReviews", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("fiveStarCount", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("fourStarCount", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("threeStarCount", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("twoStarCount", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("oneStarCount", sa.Integer(), nullable=False, server_default="0"),
        _now("updatedAt"),
    )

    op.create_table(
        "reviewHelpfulnessVotes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("reviewId", "trackReviews.id"),
        _fk("userId", "users.id"),
        sa.Column("isHelpful", sa.Boolean(), nullable=False),
        _now("createdAt"),
        sa.UniqueConstraint("userId", "reviewId", name="userReviewUnique"),
    )

    op.create_table(
        "albumReviews",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("albumId", "albums.id"),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("helpful", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("unhelpful", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("isVerifiedPurchase", sa.Boolean(), nullable=False, server_default=sa.false()),
        _now("createdAt"),
        _now("updatedAt"),
        sa.UniqueConstraint("userId", "albumId", name="userAlbumUnique"),
    )

    op.create_table(
        "artistResponses",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("reviewId", "trackReviews.id", unique=True),
        _fk("artistId", "users.id"),
        sa.Column("content", sa.Text(), nullable=False),
        _now("createdAt"),
        _now("updatedAt"),
    )

    # ========================================================================
    # MODERATION & BADGES
    # ========================================================================

    op.create_table(
        "reviewModeration",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("reviewId", "trackReviews.id"),
        _fk("flaggedBy", "users.id"),
        sa.Column("reason", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("ck_reviewModeration_status", "pending", "approved", "rejected", "resolved"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("moderatorNotes", sa.Text(), nullable=True),
        _fk("reviewedBy", "users.id", ondelete="SET NULL"),
        sa.Column("reviewedAt", sa.DateTime(timezone=True), nullable=True),
        _now("createdAt"),
        _now("updatedAt"),
    )

    op.create_table(
        "listenerBadges",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(64), unique=True, nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(255), nullable=True),
        sa.Column("criteria", sa.String(255), nullable=False),
        sa.Column("color", sa.String(7), nullable=True, server_default="#9333ea"),
        _now("createdAt"),
    )

    op.create_table(
        "userBadgeAssignments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("badgeId", "listenerBadges.id"),
        _now("earnedAt"),
        sa.UniqueConstraint("userId", "badgeId", name="userBadgeUnique"),
    )

    op.create_table(
        "badgeCriteriaTracking",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("badgeId", "listenerBadges.id"),
        sa.Column("progress", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("target", sa.Integer(), nullable=False),
        _now("lastUpdated"),
        sa.UniqueConstraint("userId", "badgeId", name="userBadgeCriteriaUnique"),
    )

    # ========================================================================
    # COLLABORATION
    # ========================================================================

    op.create_table(
        "collaborationInvites",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("invitedBy", "users.id"),
        _fk("invitedUser", "users.id"),
        _fk("musicUploadId", "musicUploads.id"),
        sa.Column(
            "role",
            _enum("ck_collaborationInvites_role", "viewer", "editor", "admin"),
            nullable=False,
            server_default="viewer",
        ),
        sa.Column(
            "status",
            _enum("ck_collaborationInvites_status", "pending", "accepted", "rejected", "revoked"),
            nullable=False,
            server_default="pending",
        ),
        _now("createdAt"),
        sa.Column("respondedAt", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("invitedUser", "musicUploadId", name="unique_invite"),
    )

    op.create_table(
        "collaborators",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("musicUploadId", "musicUploads.id"),
        sa.Column(
            "role",
            _enum("ck_collaborators_role", "viewer", "editor", "admin"),
            nullable=False,
            server_default="viewer",
        ),
        _now("joinedAt"),
        sa.UniqueConstraint("userId", "musicUploadId", name="unique_collaborator"),
    )

    op.create_table(
        "collaborationActivityLog",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _fk("userId", "users.id"),
        _fk("musicUploadId", "musicUploads.id"),
        sa.Column("action", sa.String(100), nullable=False),
        sa.Column("details", sa.String(500), nullable=True),
        _now("timestamp"),
    )


def downgrade() -> None:
    for table in (
        "collaborationActivityLog",
        "collaborators",
        "collaborationInvites",
        "badgeCriteriaTracking",
        "userBadgeAssignments",
        "listenerBadges",
        "reviewModeration",
        "artistResponses",
        "albumReviews",
        "reviewHelpfulnessVotes",
        "trackRatings",
        "trackReviews",
        "activityFeed",
        "userFollows",
        "shareEvents",
        "shareAnalytics",
        "shares",
        "userFavorites",
        "userListeningHistory",
        "streamHistory",
        "favorites",
    ):
        op.drop_table(table)
