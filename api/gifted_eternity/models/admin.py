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
from sqlalchemy.orm import relationship

from ..db import Base


# ============================================================================
# ADMIN ACCESS CONTROL
# ============================================================================


class AdminUser(Base):
    """Admin account layered on a regular user, signed in by email or Gmail."""

    __tablename__ = "adminUsers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        "userId", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    email = Column(String(255), unique=True, nullable=False)
    gmail_id = Column("gmailId", String(255), unique=True, nullable=True)
    passcode_hash = Column("passcodeHash", String(255), nullable=True)
    passcode_verified = Column("passcodeVerified", Boolean, nullable=False, server_default=false())
    verification_code = Column("verificationCode", String(6), nullable=True)
    verification_code_expiry = Column("verificationCodeExpiry", DateTime(timezone=True), nullable=True)
    last_login = Column("lastLogin", DateTime(timezone=True), nullable=True)
    is_active = Column("isActive", Boolean, nullable=False, server_default=true())
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    sessions = relationship(
        "AdminSession", back_populates="admin", cascade="all, delete-orphan", passive_deletes=True
    )
    permissions = relationship(
        "AdminPermission", back_populates="admin", cascade="all, delete-orphan", passive_deletes=True
    )


class AdminSession(Base):
    __tablename__ = "adminSessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    admin_id = Column(
        "adminId", Integer, ForeignKey("adminUsers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    session_token = Column("sessionToken", String(255), unique=True, nullable=False)
    ip_address = Column("ipAddress", String(45), nullable=True)  # fits IPv6
    user_agent = Column("userAgent", String(500), nullable=True)
    expires_at = Column("expiresAt", DateTime(timezone=True), nullable=False)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())

    admin = relationship("AdminUser", back_populates="sessions")


class AdminActivityLog(Base):
    """Audit trail of admin actions."""

    __tablename__ = "adminActivityLog"

    id = Column(Integer, primary_key=True, autoincrement=True)
    admin_id = Column(
        "adminId", Integer, ForeignKey("adminUsers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    action = Column(String(100), nullable=False)  # login, logout, create, update, delete
    entity_type = Column("entityType", String(50), nullable=True)  # user, track, payment
    entity_id = Column("entityId", Integer, nullable=True)
    details = Column(Text, nullable=True)
    ip_address = Column("ipAddress", String(45), nullable=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class AdminPermission(Base):
    __tablename__ = "adminPermissions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    admin_id = Column(
        "adminId", Integer, ForeignKey("adminUsers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    permission = Column(String(100), nullable=False)  # view_analytics, manage_users, ...
    granted_at = Column("grantedAt", DateTime(timezone=True), nullable=False, server_default=func.now())

    admin = relationship("AdminUser", back_populates="permissions")


class AdminSetting(Base):
    __tablename__ = "adminSettings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    admin_id = Column(
        "adminId", Integer, ForeignKey("adminUsers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    setting_key = Column("settingKey", String(100), nullable=False)
    setting_value = Column("settingValue", Text, nullable=True)
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
