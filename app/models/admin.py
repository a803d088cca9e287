"""Admin account and server-side session models."""

from datetime import datetime

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Integer, Index
from sqlalchemy.orm import relationship, validates
from app.models.base import BaseModel


class Admin(BaseModel):
    """
    Administrator allowed to manage products and read submissions.

    Attributes:
        email: Unique login email
        password_hash: bcrypt hash of the password
        active: Whether the account may log in
    """

    __tablename__ = "admins"

    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(200), nullable=True)
    active = Column(Boolean, default=True, nullable=False)
    last_login_at = Column(DateTime, nullable=True)

    sessions = relationship(
        "AdminSession", back_populates="admin", cascade="all, delete-orphan"
    )

    __table_args__ = (Index("idx_admin_email", "email"),)

    @validates("email")
    def validate_email(self, key, value):
        """Validate email format."""
        if not value or not value.strip():
            raise ValueError("Email cannot be empty")
        value = value.strip().lower()
        if "@" not in value or "." not in value.split("@")[1]:
            raise ValueError("Invalid email format")
        return value

    def set_password(self, password):
        """Set admin password using bcrypt."""
        from app.core.security import get_password_hash

        self.password_hash = get_password_hash(password)

    def check_password(self, password):
        """Check password using bcrypt."""
        if not self.active:
            return False
        if not self.password_hash:
            return False
        from app.core.security import verify_password

        return verify_password(password, self.password_hash)

    def __repr__(self):
        """String representation of Admin."""
        return f"<Admin(id={self.id}, email='{self.email}', active={self.active})>"


class AdminSession(BaseModel):
    """
    Server-side login session referenced by the session cookie.

    Attributes:
        token: Opaque random token stored in the cookie
        admin_id: Owning admin
        expires_at: Moment after which the session is rejected
    """

    __tablename__ = "admin_sessions"

    token = Column(String(128), unique=True, nullable=False)
    admin_id = Column(Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(String(500), nullable=True)

    admin = relationship("Admin", back_populates="sessions")

    __table_args__ = (
        Index("idx_admin_session_token", "token"),
        Index("idx_admin_session_expires_at", "expires_at"),
    )

    @property
    def is_expired(self):
        """Check if the session has passed its expiry time."""
        return self.expires_at <= datetime.utcnow()

    def __repr__(self):
        """String representation of AdminSession."""
        return f"<AdminSession(id={self.id}, admin_id={self.admin_id}, expires_at={self.expires_at})>"
