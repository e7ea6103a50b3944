"""Stripe and PayPal records: customers, subscriptions, invoices, payouts and webhook events.

Provider identifiers (`stripe_*_id`, `payout_batch_id`, `external_event_id`) are
unique so replaying a webhook cannot create a second row. Amounts are cents.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
    false,
    func,
)
from sqlalchemy.orm import relationship

from ..db import Base
from ..enums import (
    BillingCycleStatus,
    InvoiceStatus,
    PaymentProvider,
    PaypalAccountStatus,
    PaypalPayoutStatus,
    StripeSubscriptionStatus,
    TransactionStatus,
    TransactionType,
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
# STRIPE
# ============================================================================


class StripeCustomer(Base):
    __tablename__ = "stripe_customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    stripe_customer_id = Column(Text, unique=True, nullable=False)
    email = Column(Text, nullable=False)
    payment_method_id = Column(Text, nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()

    # Relationships
    subscriptions = relationship(
        "StripeSubscription",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class StripeSubscription(Base):
    __tablename__ = "stripe_subscriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    stripe_subscription_id = Column(Text, unique=True, nullable=False)
    stripe_customer_id = Column(
        Text,
        ForeignKey("stripe_customers.stripe_customer_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    price_id = Column(Text, nullable=False)
    status = Column(
        enum_type(StripeSubscriptionStatus, "ck_stripe_subscriptions_status"), nullable=False
    )
    current_period_start = Column(DateTime(timezone=True), nullable=False)
    current_period_end = Column(DateTime(timezone=True), nullable=False)
    canceled_at = Column(DateTime(timezone=True), nullable=True)
    cancel_at_period_end = Column(Boolean, nullable=False, server_default=false())
    trial_start = Column(DateTime(timezone=True), nullable=True)
    trial_end = Column(DateTime(timezone=True), nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()

    # Relationships
    customer = relationship("StripeCustomer", back_populates="subscriptions")
    invoices = relationship("StripeInvoice", back_populates="subscription", passive_deletes=True)

    __table_args__ = (
        Index("stripe_subscriptions_user_id_idx", "user_id"),
        Index("stripe_subscriptions_status_idx", "status"),
    )


class StripeInvoice(Base):
    __tablename__ = "stripe_invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    stripe_invoice_id = Column(Text, unique=True, nullable=False)
    # Invoices are financial records and outlive the subscription row
    stripe_subscription_id = Column(
        Text,
        ForeignKey("stripe_subscriptions.stripe_subscription_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    amount = Column(Integer, nullable=False)
    currency = Column(Text, nullable=False, server_default="usd")
    status = Column(enum_type(InvoiceStatus, "ck_stripe_invoices_status"), nullable=False)
    paid_at = Column(DateTime(timezone=True), nullable=True)
    due_date = Column(DateTime(timezone=True), nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()

    subscription = relationship("StripeSubscription", back_populates="invoices")

    __table_args__ = (
        Index("stripe_invoices_user_id_idx", "user_id"),
        Index("stripe_invoices_status_idx", "status"),
    )


# ============================================================================
# PAYPAL
# ============================================================================


class PaypalAccount(Base):
    """Verified PayPal payout destination. One per user."""

    __tablename__ = "paypal_accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    paypal_email = Column(Text, unique=True, nullable=False)
    paypal_merchant_id = Column(Text, nullable=True)
    status = Column(
        enum_type(PaypalAccountStatus, "ck_paypal_accounts_status"),
        nullable=False,
        server_default=PaypalAccountStatus.PENDING.value,
    )
    verified_at = Column(DateTime(timezone=True), nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()

    # Payouts are keyed by user, not by account row
    payouts = relationship(
        "PaypalPayout",
        primaryjoin="PaypalAccount.user_id == foreign(PaypalPayout.user_id)",
        viewonly=True,
    )


class PaypalPayout(Base):
    __tablename__ = "paypal_payouts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    payout_batch_id = Column(Text, unique=True, nullable=False)
    amount = Column(Integer, nullable=False)
    currency = Column(Text, nullable=False, server_default="usd")
    status = Column(enum_type(PaypalPayoutStatus, "ck_paypal_payouts_status"), nullable=False)
    recipient_email = Column(Text, nullable=False)
    note = Column(Text, nullable=True)
    failure_reason = Column(Text, nullable=True)
    initiated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()

    __table_args__ = (
        Index("paypal_payouts_user_id_idx", "user_id"),
        Index("paypal_payouts_status_idx", "status"),
    )


# ============================================================================
# LEDGER
# ============================================================================


class PaymentEvent(Base):
    """Inbound webhook event, stored once per provider event id."""

    __tablename__ = "payment_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_type = Column(Text, nullable=False)  # charge.succeeded, customer.subscription.updated, ...
    provider = Column(enum_type(PaymentProvider, "ck_payment_events_provider"), nullable=False)
    external_event_id = Column(Text, unique=True, nullable=False)
    # Events are an audit trail and survive account deletion
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    related_id = Column(Text, nullable=True)  # subscription, invoice or payout id
    data = Column(Text, nullable=True)  # JSON payload
    processed = Column(Boolean, nullable=False, server_default=false())
    processed_at = Column(DateTime(timezone=True), nullable=True)
    error = Column(Text, nullable=True)
    created_at = _created_at()

    __table_args__ = (
        Index("payment_events_user_id_idx", "user_id"),
        Index("payment_events_type_idx", "event_type"),
        Index("payment_events_provider_idx", "provider"),
        Index("payment_events_processed_idx", "processed"),
    )


class TransactionHistory(Base):
    __tablename__ = "transaction_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    type = Column(enum_type(TransactionType, "ck_transaction_history_type"), nullable=False)
    amount = Column(Integer, nullable=False)
    currency = Column(Text, nullable=False, server_default="usd")
    description = Column(Text, nullable=True)
    status = Column(enum_type(TransactionStatus, "ck_transaction_history_status"), nullable=False)
    provider = Column(enum_type(PaymentProvider, "ck_transaction_history_provider"), nullable=True)
    external_transaction_id = Column(Text, nullable=True)
    related_entity_id = Column(Integer, nullable=True)  # subscription, payout, billing cycle
    related_entity_type = Column(Text, nullable=True)
    created_at = _created_at()
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # related_entity_id is polymorphic, so this join is read-only
    billing_cycle = relationship(
        "BillingCycle",
        primaryjoin="foreign(TransactionHistory.related_entity_id) == BillingCycle.id",
        viewonly=True,
    )

    __table_args__ = (
        Index("transaction_history_user_id_idx", "user_id"),
        Index("transaction_history_type_idx", "type"),
        Index("transaction_history_status_idx", "status"),
    )


class BillingCycle(Base):
    __tablename__ = "billing_cycles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    subscription_id = Column(
        Integer, ForeignKey("stripe_subscriptions.id", ondelete="SET NULL"), nullable=True
    )
    cycle_start = Column(DateTime(timezone=True), nullable=False)
    cycle_end = Column(DateTime(timezone=True), nullable=False)
    amount = Column(Integer, nullable=False)
    status = Column(
        enum_type(BillingCycleStatus, "ck_billing_cycles_status"),
        nullable=False,
        server_default=BillingCycleStatus.PENDING.value,
    )
    charged_at = Column(DateTime(timezone=True), nullable=True)
    failure_count = Column(Integer, nullable=False, server_default="0")
    last_failure_reason = Column(Text, nullable=True)
    created_at = _created_at()
    updated_at = _updated_at()

    __table_args__ = (
        Index("billing_cycles_user_id_idx", "user_id"),
        Index("billing_cycles_subscription_id_idx", "subscription_id"),
        Index("billing_cycles_status_idx", "status"),
    )
