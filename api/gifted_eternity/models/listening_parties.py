"""Live listening parties: synchronized playback with chat, queue, votes and reactions.

Child tables reference a party by its public text key `party_id`, not by the
surrogate `id`, and go away with the party.
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
    UniqueConstraint,
    false,
    func,
    true,
)
from sqlalchemy.orm import relationship

from ..db import Base
from ..enums import (
    ChatMessageType,
    ParticipantRole,
    PartyStatus,
    QueueItemStatus,
    SyncEventType,
    VoteChoice,
    VoteStatus,
    VoteType,
)
from ..types import enum_type


def _party_fk() -> Column:
    return Column(
        "party_id",
        Text,
        ForeignKey("listening_parties.party_id", ondelete="CASCADE"),
        nullable=False,
    )


def _party_children(target: str):
    return relationship(
        target,
        back_populates="party",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ListeningParty(Base):
    __tablename__ = "listening_parties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    party_id = Column(Text, unique=True, nullable=False)
    host_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    party_name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        enum_type(PartyStatus, "ck_listening_parties_status"),
        nullable=False,
        server_default=PartyStatus.ACTIVE.value,
    )
    current_track_id = Column(
        Integer, ForeignKey("tracks.id", ondelete="SET NULL"), nullable=True, index=True
    )
    current_track_position = Column(Integer, nullable=False, server_default="0")  # seconds
    playlist_id = Column(
        Integer, ForeignKey("playlists.id", ondelete="SET NULL"), nullable=True, index=True
    )
    is_public = Column(Boolean, nullable=False, server_default=true())
    max_participants = Column(Integer, nullable=False, server_default="50")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )
    ended_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    participants = _party_children("PartyParticipant")
    chat_messages = _party_children("PartyChatMessage")
    playlist_queue = relationship(
        "PartyQueueItem",
        back_populates="party",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PartyQueueItem.position",
    )
    voting = _party_children("PartyVote")
    reactions = _party_children("PartyReaction")
    sync_events = _party_children("PartySyncEvent")

    __table_args__ = (
        Index("listening_parties_host_id_idx", "host_user_id"),
        Index("listening_parties_status_idx", "status"),
        Index("listening_parties_is_public_idx", "is_public"),
    )


class PartyParticipant(Base):
    __tablename__ = "party_participants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    party_id = _party_fk()
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    role = Column(
        enum_type(ParticipantRole, "ck_party_participants_role"),
        nullable=False,
        server_default=ParticipantRole.PARTICIPANT.value,
    )
    joined_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    left_at = Column(DateTime(timezone=True), nullable=True)
    is_active = Column(Boolean, nullable=False, server_default=true())
    last_heartbeat = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    party = relationship("ListeningParty", back_populates="participants")

    __table_args__ = (
        Index("party_participants_party_id_idx", "party_id"),
        Index("party_participants_user_id_idx", "user_id"),
        Index("party_participants_role_idx", "role"),
    )


class PartyChatMessage(Base):
    __tablename__ = "party_chat_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    party_id = _party_fk()
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    message = Column(Text, nullable=False)
    message_type = Column(
        enum_type(ChatMessageType, "ck_party_chat_messages_message_type"),
        nullable=False,
        server_default=ChatMessageType.TEXT.value,
    )
    reaction = Column(Text, nullable=True)  # emoji
    is_edited = Column(Boolean, nullable=False, server_default=false())
    edited_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    party = relationship("ListeningParty", back_populates="chat_messages")

    __table_args__ = (
        Index("party_chat_messages_party_id_idx", "party_id"),
        Index("party_chat_messages_user_id_idx", "user_id"),
        Index("party_chat_messages_created_at_idx", "created_at"),
    )


class PartyQueueItem(Base):
    __tablename__ = "party_playlist_queue"

    id = Column(Integer, primary_key=True, autoincrement=True)
    party_id = _party_fk()
    track_id = Column(Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False)
    added_by_user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False)
    status = Column(
        enum_type(QueueItemStatus, "ck_party_playlist_queue_status"),
        nullable=False,
        server_default=QueueItemStatus.QUEUED.value,
    )
    upvotes = Column(Integer, nullable=False, server_default="0")
    downvotes = Column(Integer, nullable=False, server_default="0")
    added_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    played_at = Column(DateTime(timezone=True), nullable=True)

    party = relationship("ListeningParty", back_populates="playlist_queue")

    __table_args__ = (
        Index("party_playlist_queue_party_id_idx", "party_id"),
        Index("party_playlist_queue_track_id_idx", "track_id"),
        Index("party_playlist_queue_status_idx", "status"),
    )


class PartyVote(Base):
    """A vote (skip, pause, resume) opened in a party."""

    __tablename__ = "party_voting"

    id = Column(Integer, primary_key=True, autoincrement=True)
    party_id = _party_fk()
    vote_type = Column(enum_type(VoteType, "ck_party_voting_vote_type"), nullable=False)
    target_track_id = Column(
        Integer, ForeignKey("tracks.id", ondelete="SET NULL"), nullable=True, index=True
    )
    initiated_by_user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    votes_for = Column(Integer, nullable=False, server_default="1")  # initiator counts
    votes_against = Column(Integer, nullable=False, server_default="0")
    status = Column(
        enum_type(VoteStatus, "ck_party_voting_status"),
        nullable=False,
        server_default=VoteStatus.ACTIVE.value,
    )
    required_votes = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    resolved_at = Column(DateTime(timezone=True), nullable=True)

    party = relationship("ListeningParty", back_populates="voting")
    ballots = relationship(
        "PartyUserVote", back_populates="poll", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        Index("party_voting_party_id_idx", "party_id"),
        Index("party_voting_vote_type_idx", "vote_type"),
        Index("party_voting_status_idx", "status"),
    )


class PartyUserVote(Base):
    """One user's ballot on a party vote."""

    __tablename__ = "party_user_votes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vote_id = Column(Integer, ForeignKey("party_voting.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    vote = Column(enum_type(VoteChoice, "ck_party_user_votes_vote"), nullable=False)
    voted_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    poll = relationship("PartyVote", back_populates="ballots")

    __table_args__ = (
        Index("party_user_votes_vote_id_idx", "vote_id"),
        Index("party_user_votes_user_id_idx", "user_id"),
        UniqueConstraint("vote_id", "user_id", name="party_user_votes_unique_idx"),
    )


class PartyReaction(Base):
    __tablename__ = "party_reactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    party_id = _party_fk()
    track_id = Column(Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    emoji = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    party = relationship("ListeningParty", back_populates="reactions")

    __table_args__ = (
        Index("party_reactions_party_id_idx", "party_id"),
        Index("party_reactions_track_id_idx", "track_id"),
        Index("party_reactions_user_id_idx", "user_id"),
    )


class PartySyncEvent(Base):
    """Playback state change broadcast to party members."""

    __tablename__ = "party_sync_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    party_id = _party_fk()
    event_type = Column(enum_type(SyncEventType, "ck_party_sync_events_event_type"), nullable=False)
    track_id = Column(Integer, ForeignKey("tracks.id", ondelete="SET NULL"), nullable=True, index=True)
    position = Column(Integer, nullable=True)  # seconds into the track
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    party = relationship("ListeningParty", back_populates="sync_events")

    __table_args__ = (
        Index("party_sync_events_party_id_idx", "party_id"),
        Index("party_sync_events_event_type_idx", "event_type"),
    )
