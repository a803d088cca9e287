"""Security utilities for admin authentication."""

import secrets
from datetime import datetime, timedelta
from typing import Optional

import bcrypt as _bcrypt

from app.config import settings

# Session settings
SESSION_TOKEN_BYTES = 48


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a bcrypt hash."""
    try:
        return _bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except ValueError:
        # Malformed stored hash
        return False


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt."""
    return _bcrypt.hashpw(password.encode(), _bcrypt.gensalt()).decode()


def generate_session_token() -> str:
    """Create an opaque, URL-safe session token."""
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


def session_expiry(
    now: Optional[datetime] = None, expires_delta: Optional[timedelta] = None
) -> datetime:
    """Expiry time for a session created at ``now``."""
    now = now or datetime.utcnow()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.session_expire_minutes)
    return now + expires_delta
