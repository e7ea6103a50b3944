from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    false,
    func,
)
from sqlalchemy.orm import relationship

from ..db import Base
from ..enums import (
    PaymentStatus,
    PaypalSubscriptionStatus,
    PostType,
    SubscriptionStatus,
    UserRole,
)
from ..types import enum_type


# ============================================================================
# USERS
# ============================================================================


class User(Base):
    """Platform account backing the OAuth sign-in flow. Root of the reference graph."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    open_id = Column(
        "openId", String(64), unique=True, nullable=False
    )  # OAuth identifier returned from the callback
    name = Column(Text, nullable=True)
    email = Column(String(320), nullable=True)
    login_method = Column("loginMethod", String(64), nullable=True)
    role = Column(
        enum_type(UserRole, "ck_users_role"),
        nullable=False,
        server_default=UserRole.USER.value,
    )
    email_verified = Column("emailVerified", Boolean, nullable=False, server_default=false())
    two_factor_enabled = Column(
        "twoFactorEnabled", Boolean, nullable=False, server_default=false()
    )

    # Timestamps
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
    last_signed_in = Column(
        "lastSignedIn", DateTime(timezone=True), nullable=False, server_default=func.now()
    )


# ============================================================================
# SUBSCRIPTIONS & PAYMENTS
# ============================================================================


class SubscriptionTier(Base):
    """Subscription tier offered on the platform. Prices are in cents."""

    __tablename__ = "subscriptionTiers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    monthly_price = Column("monthlyPrice", Integer, nullable=False)
    yearly_price = Column("yearlyPrice", Integer, nullable=True)
    features = Column(Text, nullable=True)  # JSON array, opaque here
    stripe_price_id = Column("stripePriceId", String(255), nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())


class UserSubscription(Base):
    """A user's subscription to a tier."""

    __tablename__ = "userSubscriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # No delete policy: a tier cannot be removed while subscribed
    tier_id = Column("tierId", Integer, ForeignKey("subscriptionTiers.id"), nullable=False, index=True)
    stripe_subscription_id = Column("stripeSubscriptionId", String(255), nullable=True)
    status = Column(enum_type(SubscriptionStatus, "ck_userSubscriptions_status"), nullable=False)
    current_period_start = Column("currentPeriodStart", DateTime(timezone=True), nullable=True)
    current_period_end = Column("currentPeriodEnd", DateTime(timezone=True), nullable=True)
    canceled_at = Column("canceledAt", DateTime(timezone=True), nullable=True)
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
    tier = relationship("SubscriptionTier")


class PaypalSubscription(Base):
    """PayPal subscription for live payments. At most one per user."""

    __tablename__ = "paypalSubscriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    paypal_subscription_id = Column("paypalSubscriptionId", String(255), unique=True, nullable=False)
    plan_id = Column("planId", String(255), nullable=False)
    tier_id = Column("tierId", Integer, ForeignKey("subscriptionTiers.id"), nullable=False, index=True)
    status = Column(
        enum_type(PaypalSubscriptionStatus, "ck_paypalSubscriptions_status"), nullable=False
    )
    current_period_start = Column("currentPeriodStart", DateTime(timezone=True), nullable=True)
    current_period_end = Column("currentPeriodEnd", DateTime(timezone=True), nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class Payment(Base):
    """Payment transaction for a subscription charge. Amount in cents."""

    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    paypal_transaction_id = Column(
        "paypalTransactionId", String(255), unique=True, nullable=True
    )  # unique so webhook redelivery cannot record a payment twice
    amount = Column(Integer, nullable=False)
    currency = Column(String(3), nullable=False, server_default="USD")
    status = Column(enum_type(PaymentStatus, "ck_payments_status"), nullable=False)
    tier_id = Column("tierId", Integer, ForeignKey("subscriptionTiers.id"), nullable=True, index=True)
    payment_method = Column("paymentMethod", String(64), nullable=True, server_default="paypal")
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class GenreAccess(Base):
    """Genre unlocked by a subscription tier."""

    __tablename__ = "genreAccess"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tier_id = Column("tierId", Integer, ForeignKey("subscriptionTiers.id"), nullable=False, index=True)
    genre = Column(String(64), nullable=False)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())


class SongPurchase(Base):
    """Single-track purchase. Price in cents."""

    __tablename__ = "songPurchases"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    track_id = Column(
        "trackId", Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    price = Column(Integer, nullable=False)
    purchased_at = Column("purchasedAt", DateTime(timezone=True), nullable=False, server_default=func.now())


class AlbumPurchase(Base):
    """Whole-album purchase. Price in cents."""

    __tablename__ = "albumPurchases"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    album_id = Column(
        "albumId", Integer, ForeignKey("albums.id", ondelete="CASCADE"), nullable=False, index=True
    )
    price = Column(Integer, nullable=False)
    purchased_at = Column("purchasedAt", DateTime(timezone=True), nullable=False, server_default=func.now())


# ============================================================================
# SITE CONTENT & ADS
# ============================================================================


class Post(Base):
    """Homepage post, testimonial or artwork showcase."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column("imageUrl", String(512), nullable=True)
    type = Column(enum_type(PostType, "ck_posts_type"), nullable=False)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class AdMetric(Base):
    """Per-user ad impression and click counters."""

    __tablename__ = "adMetrics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    ad_id = Column("adId", String(255), nullable=False)
    impressions = Column(Integer, nullable=False, server_default="0")
    clicks = Column(Integer, nullable=False, server_default="0")
    last_interaction = Column(
        "lastInteraction", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
