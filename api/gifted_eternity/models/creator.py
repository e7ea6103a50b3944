from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)

from ..db import Base
from ..enums import CreatorPayoutStatus, EarningType, TipPaymentStatus
from ..types import enum_type


# ============================================================================
# CREATOR ECONOMY (all amounts in cents)
# ============================================================================


class CreatorEarning(Base):
    """Earning credited to an artist profile, optionally attributed to a track or playlist."""

    __tablename__ = "creatorEarnings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    artist_id = Column(
        "artistId",
        Integer,
        ForeignKey("artistProfiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Earnings are kept when the attributed content is removed
    track_id = Column(
        "trackId", Integer, ForeignKey("artistUploads.id", ondelete="SET NULL"), nullable=True, index=True
    )
    playlist_id = Column(
        "playlistId",
        Integer,
        ForeignKey("userPlaylists.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    earning_type = Column(
        "earningType", enum_type(EarningType, "ck_creatorEarnings_earningType"), nullable=False
    )
    amount = Column(Integer, nullable=False)
    currency = Column(String(3), nullable=False, server_default="USD")
    period = Column(String(64), nullable=True)  # daily, weekly, monthly
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())


class CreatorPayout(Base):
    """Payout requested by an artist."""

    __tablename__ = "creatorPayouts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    artist_id = Column(
        "artistId",
        Integer,
        ForeignKey("artistProfiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount = Column(Integer, nullable=False)
    status = Column(
        enum_type(CreatorPayoutStatus, "ck_creatorPayouts_status"),
        nullable=False,
        server_default=CreatorPayoutStatus.PENDING.value,
    )
    payment_method = Column("paymentMethod", String(64), nullable=True)  # paypal, stripe, bank
    transaction_id = Column("transactionId", String(255), nullable=True)
    requested_at = Column("requestedAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    processed_at = Column("processedAt", DateTime(timezone=True), nullable=True)


class Tip(Base):
    """Tip sent from one user to another."""

    __tablename__ = "tips"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sender_id = Column(
        "senderId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    recipient_id = Column(
        "recipientId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    amount = Column(Integer, nullable=False)
    message = Column(Text, nullable=True)
    track_id = Column(
        "trackId", Integer, ForeignKey("artistUploads.id", ondelete="SET NULL"), nullable=True, index=True
    )
    payment_status = Column(
        "paymentStatus",
        enum_type(TipPaymentStatus, "ck_tips_paymentStatus"),
        nullable=False,
        server_default=TipPaymentStatus.COMPLETED.value,
    )
    stripe_payment_id = Column("stripePaymentId", String(255), nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
