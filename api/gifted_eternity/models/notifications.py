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
    true,
)

from ..db import Base
from ..enums import EmailNotificationType, NotificationType, PushPlatform
from ..types import enum_type


class Notification(Base):
    """In-app notification for a user activity."""

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(enum_type(NotificationType, "ck_notifications_type"), nullable=False)
    title = Column(String(255), nullable=False)
    message = Column(String(500), nullable=False)
    related_id = Column("relatedId", Integer, nullable=True)  # review, badge, track, ...
    related_type = Column("relatedType", String(50), nullable=True)
    is_read = Column("isRead", Boolean, nullable=False, server_default=false())
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    read_at = Column("readAt", DateTime(timezone=True), nullable=True)


class NotificationPreference(Base):
    __tablename__ = "notificationPreferences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    review_responses = Column("reviewResponses", Boolean, nullable=False, server_default=true())
    badges_earned = Column("badgesEarned", Boolean, nullable=False, server_default=true())
    new_releases = Column("newReleases", Boolean, nullable=False, server_default=true())
    collaboration_invites = Column(
        "collaborationInvites", Boolean, nullable=False, server_default=true()
    )
    comment_replies = Column("commentReplies", Boolean, nullable=False, server_default=true())
    follows = Column(Boolean, nullable=False, server_default=true())
    mentions = Column(Boolean, nullable=False, server_default=true())
    messages = Column(Boolean, nullable=False, server_default=true())
    email_notifications = Column(
        "emailNotifications", Boolean, nullable=False, server_default=false()
    )
    push_notifications = Column("pushNotifications", Boolean, nullable=False, server_default=true())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class EmailNotification(Base):
    """Queued email. Delivery happens elsewhere and flips `sent`."""

    __tablename__ = "emailNotifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(enum_type(EmailNotificationType, "ck_emailNotifications_type"), nullable=False)
    subject = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    related_id = Column("relatedId", Integer, nullable=True)
    sent = Column(Boolean, nullable=False, server_default=false())
    sent_at = Column("sentAt", DateTime(timezone=True), nullable=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())


class PushToken(Base):
    """Device token for mobile and web push."""

    __tablename__ = "pushTokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    token = Column(String(512), unique=True, nullable=False)
    platform = Column(enum_type(PushPlatform, "ck_pushTokens_platform"), nullable=False)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    last_used_at = Column("lastUsedAt", DateTime(timezone=True), nullable=True)
