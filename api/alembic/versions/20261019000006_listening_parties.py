"""listening parties: participants, chat, queue, voting, reactions and sync events

Revision ID: 20261019000006
Revises: 20261019000005
Create Date: 2026-10-19

Child tables reference listening_parties.party_id (the public text key).
"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019000006"
down_revision: str | None = "20261019000005"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True)


def _ts(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def _party_fk() -> sa.Column:
    return sa.Column(
        "party_id",
        sa.Text(),
        sa.ForeignKey("listening_parties.party_id", ondelete="CASCADE"),
        nullable=False,
    )


def _ref(name: str, target: str, *, ondelete: str = "CASCADE", index: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.Integer(),
        sa.ForeignKey(target, ondelete=ondelete),
        nullable=ondelete == "SET NULL",
        index=index,
    )


def _indexes(table: str, **columns: str) -> None:
    for suffix, column in columns.items():
        op.create_index(f"{table}_{suffix}_idx", table, [column])


def upgrade() -> None:
    op.create_table(
        "listening_parties",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("party_id", sa.Text(), unique=True, nullable=False),
        _ref("host_user_id", "users.id"),
        sa.Column("party_name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("ck_listening_parties_status", "active", "paused", "ended"),
            nullable=False,
            server_default="active",
        ),
        _ref("current_track_id", "tracks.id", ondelete="SET NULL", index=True),
        sa.Column("current_track_position", sa.Integer(), nullable=False, server_default="0"),
        _ref("playlist_id", "playlists.id", ondelete="SET NULL", index=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("max_participants", sa.Integer(), nullable=False, server_default="50"),
        _ts("created_at"),
        _ts("updated_at"),
        sa.Column("ended_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("listening_parties_host_id_idx", "listening_parties", ["host_user_id"])
    _indexes("listening_parties", status="status", is_public="is_public")

    op.create_table(
        "party_participants",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _party_fk(),
        _ref("user_id", "users.id"),
        sa.Column(
            "role",
            _enum("ck_party_participants_role", "host", "participant", "moderator"),
            nullable=False,
            server_default="participant",
        ),
        _ts("joined_at"),
        sa.Column("left_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        _ts("last_heartbeat"),
    )
    _indexes("party_participants", party_id="party_id", user_id="user_id", role="role")

    op.create_table(
        "party_chat_messages",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _party_fk(),
        _ref("user_id", "users.id"),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column(
            "message_type",
            _enum("ck_party_chat_messages_message_type", "text", "reaction", "system"),
            nullable=False,
            server_default="text",
        ),
        sa.Column("reaction", sa.Text(), nullable=True),
        sa.Column("is_edited", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("edited_at", sa.DateTime(timezone=True), nullable=True),
        _ts("created_at"),
    )
    _indexes("party_chat_messages", party_id="party_id", user_id="user_id", created_at="created_at")

    op.create_table(
        "party_playlist_queue",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _party_fk(),
        _ref("track_id", "tracks.id"),
        _ref("added_by_user_id", "users.id", index=True),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column(
            "status",
            _enum("ck_party_playlist_queue_status", "queued", "playing", "played", "skipped"),
            nullable=False,
            server_default="queued",
        ),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        _ts("added_at"),
        sa.Column("played_at", sa.DateTime(timezone=True), nullable=True),
    )
    _indexes("party_playlist_queue", party_id="party_id", track_id="track_id", status="status")

    op.create_table(
        "party_voting",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _party_fk(),
        sa.Column(
            "vote_type",
            _enum("ck_party_voting_vote_type", "skip", "pause", "resume"),
            nullable=False,
        ),
        _ref("target_track_id", "tracks.id", ondelete="SET NULL", index=True),
        _ref("initiated_by_user_id", "users.id", index=True),
        sa.Column("votes_for", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("votes_against", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "status",
            _enum("ck_party_voting_status", "active", "passed", "failed"),
            nullable=False,
            server_default="active",
        ),
        sa.Column("required_votes", sa.Integer(), nullable=False),
        _ts("created_at"),
        sa.Column("resolved_at", sa.DateTime(timezone=True), nullable=True),
    )
    _indexes("party_voting", party_id="party_id", vote_type="vote_type", status="status")

    op.create_table(
        "party_user_votes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _ref("vote_id", "party_voting.id"),
        _ref("user_id", "users.id"),
        sa.Column("vote", _enum("ck_party_user_votes_vote", "for", "against"), nullable=False),
        _ts("voted_at"),
        sa.UniqueConstraint("vote_id", "user_id", name="party_user_votes_unique_idx"),
    )
    _indexes("party_user_votes", vote_id="vote_id", user_id="user_id")

    op.create_table(
        "party_reactions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _party_fk(),
        _ref("track_id", "tracks.id"),
        _ref("user_id", "users.id"),
        sa.Column("emoji", sa.Text(), nullable=False),
        _ts("created_at"),
    )
    _indexes("party_reactions", party_id="party_id", track_id="track_id", user_id="user_id")

    op.create_table(
        "party_sync_events",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _party_fk(),
        sa.Column(
            "event_type",
            _enum("ck_party_sync_events_event_type", "play", "pause", "skip", "seek", "track_change"),
            nullable=False,
        ),
        _ref("track_id", "tracks.id", ondelete="SET NULL", index=True),
        sa.Column("position", sa.Integer(), nullable=True),
        _ref("user_id", "users.id", ondelete="SET NULL", index=True),
        _ts("timestamp"),
        _ts("created_at"),
    )
    _indexes("party_sync_events", party_id="party_id", event_type="event_type")


def downgrade() -> None:
    for table in (
        "party_sync_events",
        "party_reactions",
        "party_user_votes",
        "party_voting",
        "party_playlist_queue",
        "party_chat_messages",
        "party_participants",
        "listening_parties",
    ):
        op.drop_table(table)
