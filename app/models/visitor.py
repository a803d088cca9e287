"""Site visitor log model."""

from datetime import datetime

from sqlalchemy import Column, String, DateTime, Integer, Index
from sqlalchemy.orm import validates
from app.models.base import BaseModel


class Visitor(BaseModel):
    """
    One row per client IP address.

    Attributes:
        ip_address: Client IP (first X-Forwarded-For hop when proxied)
        user_agent: Last seen User-Agent header
        visited_at: Time of the last counted visit
        total_visits: Number of counted visits (at most one per hour)
    """

    __tablename__ = "visitors"

    ip_address = Column(String(45), unique=True, nullable=False)
    user_agent = Column(String(500), nullable=True)
    visited_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    total_visits = Column(Integer, default=1, nullable=False)

    __table_args__ = (Index("idx_visitor_visited_at", "visited_at"),)

    @validates("ip_address")
    def validate_ip_address(self, key, value):
        """Validate ip address is not empty."""
        if not value or not value.strip():
            raise ValueError("IP address cannot be empty")
        return value.strip()

    def __repr__(self):
        """String representation of Visitor."""
        return f"<Visitor(id={self.id}, ip='{self.ip_address}', visits={self.total_visits})>"
