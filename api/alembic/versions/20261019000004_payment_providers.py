"""stripe and paypal provider records, webhook events and billing ledger

Revision ID: 20261019000004
Revises: 20261019000003
Create Date: 2026-10-19
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019000004"
down_revision: str | None = "20261019000003"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

PROVIDERS = ("stripe", "paypal")


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True)


def _timestamps() -> tuple[sa.Column, sa.Column]:
    return (
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def _owner(*, unique: bool = False) -> sa.Column:
    return sa.Column(
        "user_id",
        sa.Integer(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        unique=unique,
        nullable=False,
    )


def upgrade() -> None:
    # ========================================================================
    # STRIPE
    # ========================================================================

    op.create_table(
        "stripe_customers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(unique=True),
        sa.Column("stripe_customer_id", sa.Text(), unique=True, nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("payment_method_id", sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "stripe_subscriptions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("stripe_subscription_id", sa.Text(), unique=True, nullable=False),
        sa.Column(
            "stripe_customer_id",
            sa.Text(),
            sa.ForeignKey("stripe_customers.stripe_customer_id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("price_id", sa.Text(), nullable=False),
        sa.Column(
            "status",
            _enum("ck_stripe_subscriptions_status", "active", "past_due", "canceled", "unpaid"),
            nullable=False,
        ),
        sa.Column("current_period_start", sa.DateTime(timezone=True), nullable=False),
        sa.Column("current_period_end", sa.DateTime(timezone=True), nullable=False),
        sa.Column("canceled_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("cancel_at_period_end", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("trial_start", sa.DateTime(timezone=True), nullable=True),
        sa.Column("trial_end", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("stripe_subscriptions_user_id_idx", "stripe_subscriptions", ["user_id"])
    op.create_index("stripe_subscriptions_status_idx", "stripe_subscriptions", ["status"])

    op.create_table(
        "stripe_invoices",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("stripe_invoice_id", sa.Text(), unique=True, nullable=False),
        sa.Column(
            "stripe_subscription_id",
            sa.Text(),
            sa.ForeignKey("stripe_subscriptions.stripe_subscription_id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("currency", sa.Text(), nullable=False, server_default="usd"),
        sa.Column(
            "status",
            _enum("ck_stripe_invoices_status", "draft", "open", "paid", "void", "uncollectible"),
            nullable=False,
        ),
        sa.Column("paid_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("stripe_invoices_user_id_idx", "stripe_invoices", ["user_id"])
    op.create_index("stripe_invoices_status_idx", "stripe_invoices", ["status"])

    # ========================================================================
    # PAYPAL
    # ========================================================================

    op.create_table(
        "paypal_accounts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(unique=True),
        sa.Column("paypal_email", sa.Text(), unique=True, nullable=False),
        sa.Column("paypal_merchant_id", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("ck_paypal_accounts_status", "pending", "verified", "suspended"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "paypal_payouts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column("payout_batch_id", sa.Text(), unique=True, nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("currency", sa.Text(), nullable=False, server_default="usd"),
        sa.Column(
            "status",
            _enum("ck_paypal_payouts_status", "pending", "processing", "success", "failed", "canceled"),
            nullable=False,
        ),
        sa.Column("recipient_email", sa.Text(), nullable=False),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("failure_reason", sa.Text(), nullable=True),
        sa.Column("initiated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("paypal_payouts_user_id_idx", "paypal_payouts", ["user_id"])
    op.create_index("paypal_payouts_status_idx", "paypal_payouts", ["status"])

    # ========================================================================
    # LEDGER
    # ========================================================================

    op.create_table(
        "payment_events",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("event_type", sa.Text(), nullable=False),
        sa.Column("provider", _enum("ck_payment_events_provider", *PROVIDERS), nullable=False),
        sa.Column("external_event_id", sa.Text(), unique=True, nullable=False),
        sa.Column(
            "user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("related_id", sa.Text(), nullable=True),
        sa.Column("data", sa.Text(), nullable=True),
        sa.Column("processed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("processed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("error", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("payment_events_user_id_idx", "payment_events", ["user_id"])
    op.create_index("payment_events_type_idx", "payment_events", ["event_type"])
    op.create_index("payment_events_provider_idx", "payment_events", ["provider"])
    op.create_index("payment_events_processed_idx", "payment_events", ["processed"])

    op.create_table(
        "transaction_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column(
            "type",
            _enum(
                "ck_transaction_history_type",
                "subscription_charge",
                "royalty_payout",
                "refund",
                "adjustment",
            ),
            nullable=False,
        ),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("currency", sa.Text(), nullable=False, server_default="usd"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("ck_transaction_history_status", "pending", "completed", "failed"),
            nullable=False,
        ),
        sa.Column("provider", _enum("ck_transaction_history_provider", *PROVIDERS), nullable=True),
        sa.Column("external_transaction_id", sa.Text(), nullable=True),
        sa.Column("related_entity_id", sa.Integer(), nullable=True),
        sa.Column("related_entity_type", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("transaction_history_user_id_idx", "transaction_history", ["user_id"])
    op.create_index("transaction_history_type_idx", "transaction_history", ["type"])
    op.create_index("transaction_history_status_idx", "transaction_history", ["status"])

    op.create_table(
        "billing_cycles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _owner(),
        sa.Column(
            "subscription_id",
            sa.Integer(),
            sa.ForeignKey("stripe_subscriptions.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("cycle_start", sa.DateTime(timezone=True), nullable=False),
        sa.Column("cycle_end", sa.DateTime(timezone=True), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column(
            "status",
            _enum("ck_billing_cycles_status", "pending", "charged", "failed", "refunded"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("charged_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("failure_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_failure_reason", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("billing_cycles_user_id_idx", "billing_cycles", ["user_id"])
    op.create_index("billing_cycles_subscription_id_idx", "billing_cycles", ["subscription_id"])
    op.create_index("billing_cycles_status_idx", "billing_cycles", ["status"])


def downgrade() -> None:
    # Dropping a table drops its indexes
    for table in (
        "billing_cycles",
        "transaction_history",
        "payment_events",
        "paypal_payouts",
        "paypal_accounts",
        "stripe_invoices",
        "stripe_subscriptions",
        "stripe_customers",
    ):
        op.drop_table(table)
