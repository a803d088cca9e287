"""Core module for security and shared utilities."""

from app.core.security import (
    generate_session_token,
    get_password_hash,
    session_expiry,
    verify_password,
)

__all__ = [
    "generate_session_token",
    "get_password_hash",
    "session_expiry",
    "verify_password",
]
