"""identity, commerce, catalog content and creator economy

Revision ID: 20261019000001
Revises:
Create Date: 2026-10-19

Base schema: users and everything the catalog hangs off them. Money columns
are integer cents.
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019000001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True)


def _created_at(name: str = "createdAt") -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def _updated_at(name: str = "updatedAt") -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def _user_fk(name: str = "userId", *, unique: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.Integer(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=unique,
        index=not unique,
    )


def upgrade() -> None:
    # ========================================================================
    # USERS
    # ========================================================================

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("openId", sa.String(64), unique=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("loginMethod", sa.String(64), nullable=True),
        sa.Column("role", _enum("ck_users_role", "user", "admin"), nullable=False, server_default="user"),
        sa.Column("emailVerified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("twoFactorEnabled", sa.Boolean(), nullable=False, server_default=sa.false()),
        _created_at(),
        _updated_at(),
        sa.Column("lastSignedIn", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # ========================================================================
    # SUBSCRIPTIONS & PAYMENTS
    # ========================================================================

    op.create_table(
        "subscriptionTiers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(64), unique=True, nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("monthlyPrice", sa.Integer(), nullable=False),
        sa.Column("yearlyPrice", sa.Integer(), nullable=True),
        sa.Column("features", sa.Text(), nullable=True),
        sa.Column("stripePriceId", sa.String(255), nullable=True),
        _created_at(),
    )

    op.create_table(
        "userSubscriptions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk(),
        sa.Column("tierId", sa.Integer(), sa.ForeignKey("subscriptionTiers.id"), nullable=False, index=True),
        sa.Column("stripeSubscriptionId", sa.String(255), nullable=True),
        sa.Column(
            "status",
            _enum("ck_userSubscriptions_status", "active", "canceled", "past_due", "trialing"),
            nullable=False,
        ),
        sa.Column("currentPeriodStart", sa.DateTime(timezone=True), nullable=True),
        sa.Column("currentPeriodEnd", sa.DateTime(timezone=True), nullable=True),
        sa.Column("canceledAt", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "paypalSubscriptions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk(unique=True),
        sa.Column("paypalSubscriptionId", sa.String(255), unique=True, nullable=False),
        sa.Column("planId", sa.String(255), nullable=False),
        sa.Column("tierId", sa.Integer(), sa.ForeignKey("subscriptionTiers.id"), nullable=False, index=True),
        sa.Column(
            "status",
            _enum("ck_paypalSubscriptions_status", "active", "suspended", "cancelled", "expired"),
            nullable=False,
        ),
        sa.Column("currentPeriodStart", sa.DateTime(timezone=True), nullable=True),
        sa.Column("currentPeriodEnd", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk(),
        sa.Column("paypalTransactionId", sa.String(255), unique=True, nullable=True),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False, server_default="USD"),
        sa.Column(
            "status",
            _enum("ck_payments_status", "pending", "completed", "failed", "refunded"),
            nullable=False,
        ),
        sa.Column("tierId", sa.Integer(), sa.ForeignKey("subscriptionTiers.id"), nullable=True, index=True),
        sa.Column("paymentMethod", sa.String(64), nullable=True, server_default="paypal"),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "genreAccess",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("tierId", sa.Integer(), sa.ForeignKey("subscriptionTiers.id"), nullable=False, index=True),
        sa.Column("genre", sa.String(64), nullable=False),
        _created_at(),
    )

    # ========================================================================
    # SITE CONTENT & ADS
    # ========================================================================

    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("imageUrl", sa.String(512), nullable=True),
        sa.Column("type", _enum("ck_posts_type", "post", "testimonial", "artwork"), nullable=False),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "adMetrics",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk(),
        sa.Column("adId", sa.String(255), nullable=False),
        sa.Column("impressions", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("clicks", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("lastInteraction", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        _created_at(),
    )

    # ========================================================================
    # CATALOG: ALBUMS, TRACKS, PLAYLISTS
    # ========================================================================

    op.create_table(
        "albums",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        _user_fk("artistId"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("coverArtUrl", sa.String(512), nullable=True),
        sa.Column("releaseDate", sa.DateTime(timezone=True), nullable=True),
        sa.Column("genre", sa.String(64), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "tracks",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        _user_fk("artistId"),
        sa.Column(
            "albumId", sa.Integer(), sa.ForeignKey("albums.id", ondelete="SET NULL"), nullable=True, index=True
        ),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("genre", sa.String(64), nullable=True),
        sa.Column("isrc", sa.String(12), nullable=True),
        sa.Column("audioUrl", sa.String(512), nullable=False),
        sa.Column("audioKey", sa.String(512), nullable=False, server_default="default-key"),
        sa.Column("coverArtUrl", sa.String(512), nullable=True),
        sa.Column("lyrics", sa.Text(), nullable=True),
        sa.Column("isPublished", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("playCount", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "songPurchases",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk(),
        sa.Column(
            "trackId", sa.Integer(), sa.ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
        ),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("purchasedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "albumPurchases",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk(),
        sa.Column(
            "albumId", sa.Integer(), sa.ForeignKey("albums.id", ondelete="CASCADE"), nullable=False, index=True
        ),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("purchasedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "playlists",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        _user_fk(),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("isPublic", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("coverArtUrl", sa.String(512), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "playlistTracks",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "playlistId",
            sa.Integer(),
            sa.ForeignKey("playlists.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "trackId", sa.Integer(), sa.ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("addedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # ========================================================================
    # USER-GENERATED CONTENT
    # ========================================================================

    op.create_table(
        "uploadedFiles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk(),
        sa.Column("fileName", sa.String(255), nullable=False),
        sa.Column("fileKey", sa.String(512), unique=True, nullable=False),
        sa.Column("fileUrl", sa.String(512), nullable=False),
        sa.Column(
            "fileType", _enum("ck_uploadedFiles_fileType", "audio", "image", "video"), nullable=False
        ),
        sa.Column("mimeType", sa.String(100), nullable=False),
        sa.Column("fileSize", sa.Integer(), nullable=False),
        sa.Column("metadata", sa.Text(), nullable=True),
        sa.Column("uploadedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "artistProfiles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk(unique=True),
        sa.Column("artistName", sa.String(255), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("profileImage", sa.String(512), nullable=True),
        sa.Column("bannerImage", sa.String(512), nullable=True),
        sa.Column("genre", sa.String(64), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("website", sa.String(512), nullable=True),
        sa.Column("socialLinks", sa.Text(), nullable=True),
        sa.Column("followers", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("totalPlays", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("verifiedBadge", sa.Boolean(), nullable=False, server_default=sa.false()),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "artistUploads",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "artistId",
            sa.Integer(),
            sa.ForeignKey("artistProfiles.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("genre", sa.String(64), nullable=False),
        sa.Column("audioUrl", sa.String(512), nullable=False),
        sa.Column("audioKey", sa.String(512), nullable=False),
        sa.Column("coverArtUrl", sa.String(512), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("bpm", sa.Integer(), nullable=True),
        sa.Column("key", sa.String(10), nullable=True),
        sa.Column("releaseDate", sa.DateTime(timezone=True), nullable=True),
        sa.Column("isPublished", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("isExplicit", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("downloadable", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("downloadPrice", sa.Integer(), nullable=True),
        sa.Column("plays", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downloads", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "userPlaylists",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("coverImageUrl", sa.String(512), nullable=True),
        sa.Column("isPublic", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("plays", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("shares", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("followers", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "playlistFollowers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "playlistId",
            sa.Integer(),
            sa.ForeignKey("userPlaylists.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        _user_fk(),
        sa.Column("followedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("playlistId", "userId", name="playlistFollowerUnique"),
    )

    op.create_table(
        "playlistShares",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "playlistId",
            sa.Integer(),
            sa.ForeignKey("userPlaylists.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        _user_fk("sharedBy"),
        sa.Column("platform", sa.String(64), nullable=True),
        sa.Column("sharedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # ========================================================================
    # MUSIC UPLOADS
    # ========================================================================

    op.create_table(
        "musicUploads",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk("uploadedBy"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("artist", sa.String(255), nullable=False),
        sa.Column("album", sa.String(255), nullable=True),
        sa.Column("genre", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("fileKey", sa.String(500), nullable=False),
        sa.Column("fileUrl", sa.String(500), nullable=False),
        sa.Column("mimeType", sa.String(100), nullable=False),
        sa.Column("fileSize", sa.Integer(), nullable=True),
        sa.Column(
            "status",
            _enum("ck_musicUploads_status", "draft", "processing", "published", "archived"),
            nullable=False,
            server_default="draft",
        ),
        sa.Column("releaseDate", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "albumArtwork",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk("uploadedBy"),
        sa.Column("albumName", sa.String(255), nullable=False),
        sa.Column("artworkKey", sa.String(500), nullable=False),
        sa.Column("artworkUrl", sa.String(500), nullable=False),
        sa.Column("mimeType", sa.String(100), nullable=False),
        sa.Column("fileSize", sa.Integer(), nullable=True),
        sa.Column("width", sa.Integer(), nullable=True),
        sa.Column("height", sa.Integer(), nullable=True),
        sa.Column(
            "status",
            _enum("ck_albumArtwork_status", "draft", "approved", "published"),
            nullable=False,
            server_default="draft",
        ),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "uploadSessions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk("uploadedBy"),
        sa.Column("sessionId", sa.String(255), unique=True, nullable=False),
        sa.Column("fileName", sa.String(255), nullable=False),
        sa.Column("fileType", sa.String(100), nullable=False),
        sa.Column("totalSize", sa.Integer(), nullable=False),
        sa.Column("uploadedSize", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "status",
            _enum("ck_uploadSessions_status", "pending", "uploading", "completed", "failed"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("errorMessage", sa.Text(), nullable=True),
        _created_at(),
        sa.Column("expiresAt", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "musicMetadata",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "musicUploadId",
            sa.Integer(),
            sa.ForeignKey("musicUploads.id", ondelete="CASCADE"),
            unique=True,
            nullable=False,
        ),
        sa.Column("composer", sa.String(255), nullable=True),
        sa.Column("lyricist", sa.String(255), nullable=True),
        sa.Column("producer", sa.String(255), nullable=True),
        sa.Column("recordLabel", sa.String(255), nullable=True),
        sa.Column("isrc", sa.String(20), nullable=True),
        sa.Column("iswc", sa.String(20), nullable=True),
        sa.Column("bpm", sa.Integer(), nullable=True),
        sa.Column("key", sa.String(10), nullable=True),
        sa.Column("language", sa.String(10), nullable=True),
        sa.Column("lyrics", sa.Text(), nullable=True),
        sa.Column("tags", sa.String(500), nullable=True),
        _created_at(),
        _updated_at(),
    )

    # ========================================================================
    # CREATOR ECONOMY
    # ========================================================================

    op.create_table(
        "creatorEarnings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "artistId",
            sa.Integer(),
            sa.ForeignKey("artistProfiles.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "trackId",
            sa.Integer(),
            sa.ForeignKey("artistUploads.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column(
            "playlistId",
            sa.Integer(),
            sa.ForeignKey("userPlaylists.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column(
            "earningType",
            _enum("ck_creatorEarnings_earningType", "streams", "downloads", "tips", "merchandise"),
            nullable=False,
        ),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False, server_default="USD"),
        sa.Column("period", sa.String(64), nullable=True),
        _created_at(),
    )

    op.create_table(
        "creatorPayouts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "artistId",
            sa.Integer(),
            sa.ForeignKey("artistProfiles.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column(
            "status",
            _enum("ck_creatorPayouts_status", "pending", "processing", "completed", "failed"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("paymentMethod", sa.String(64), nullable=True),
        sa.Column("transactionId", sa.String(255), nullable=True),
        sa.Column("requestedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("processedAt", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "tips",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _user_fk("senderId"),
        _user_fk("recipientId"),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column(
            "trackId",
            sa.Integer(),
            sa.ForeignKey("artistUploads.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column(
            "paymentStatus",
            _enum("ck_tips_paymentStatus", "pending", "completed", "failed"),
            nullable=False,
            server_default="completed",
        ),
        sa.Column("stripePaymentId", sa.String(255), nullable=True),
        _created_at(),
    )


def downgrade() -> None:
    # Reverse dependency order
    for table in (
        "tips",
        "creatorPayouts",
        "creatorEarnings",
        "musicMetadata",
        "uploadSessions",
        "albumArtwork",
        "musicUploads",
        "playlistShares",
        "playlistFollowers",
        "userPlaylists",
        "artistUploads",
        "artistProfiles",
        "uploadedFiles",
        "playlistTracks",
        "playlists",
        "albumPurchases",
        "songPurchases",
        "tracks",
        "albums",
        "adMetrics",
        "posts",
        "genreAccess",
        "payments",
        "paypalSubscriptions",
        "userSubscriptions",
        "subscriptionTiers",
        "users",
    ):
        op.drop_table(table)
