"""Rate limiting configuration."""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings


def get_client_ip(request: Request) -> str:
    """Extract real client IP, respecting X-Forwarded-For from the reverse proxy."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # First IP in the chain is the real client
        ip = forwarded.split(",")[0].strip()
    else:
        ip = get_remote_address(request)

    if ip in ("::1", "::ffff:127.0.0.1"):
        return "127.0.0.1"
    return ip


limiter = Limiter(key_func=get_client_ip, enabled=settings.rate_limit_enabled)
