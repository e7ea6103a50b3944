from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from ..db import Base
from ..enums import CollaboratorRole, InviteStatus
from ..types import enum_type


class CollaborationInvite(Base):
    """Invitation to collaborate on an upload. One open invite per (user, upload)."""

    __tablename__ = "collaborationInvites"

    id = Column(Integer, primary_key=True, autoincrement=True)
    invited_by = Column(
        "invitedBy", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    invited_user = Column(
        "invitedUser", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    music_upload_id = Column(
        "musicUploadId",
        Integer,
        ForeignKey("musicUploads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role = Column(
        enum_type(CollaboratorRole, "ck_collaborationInvites_role"),
        nullable=False,
        server_default=CollaboratorRole.VIEWER.value,
    )
    status = Column(
        enum_type(InviteStatus, "ck_collaborationInvites_status"),
        nullable=False,
        server_default=InviteStatus.PENDING.value,
    )
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    responded_at = Column("respondedAt", DateTime(timezone=True), nullable=True)

    __table_args__ = (UniqueConstraint("invitedUser", "musicUploadId", name="unique_invite"),)


class Collaborator(Base):
    """Active collaboration on an upload."""

    __tablename__ = "collaborators"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    music_upload_id = Column(
        "musicUploadId",
        Integer,
        ForeignKey("musicUploads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role = Column(
        enum_type(CollaboratorRole, "ck_collaborators_role"),
        nullable=False,
        server_default=CollaboratorRole.VIEWER.value,
    )
    joined_at = Column("joinedAt", DateTime(timezone=True), nullable=False, server_default=func.now())

    # Relationships
    user = relationship("User")
    music_upload = relationship("MusicUpload")

    __table_args__ = (UniqueConstraint("userId", "musicUploadId", name="unique_collaborator"),)


class CollaborationActivityLog(Base):
    __tablename__ = "collaborationActivityLog"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    music_upload_id = Column(
        "musicUploadId",
        Integer,
        ForeignKey("musicUploads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    action = Column(String(100), nullable=False)  # edited_metadata, published, commented
    details = Column(String(500), nullable=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
