"""Visitor log schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class VisitorResponse(BaseModel):
    """Visitor log entry."""

    id: int
    ip_address: str
    user_agent: Optional[str] = None
    visited_at: datetime
    total_visits: int
    created_at: datetime

    model_config = {"from_attributes": True}


class VisitorLogged(BaseModel):
    """Acknowledgement for a logged visit."""

    success: bool = True
    message: str = "Visitor logged"


class VisitorStats(BaseModel):
    """Aggregate visitor counts."""

    unique_visitors: int
    total_visits: int
    active_last_24h: int
    active_last_7d: int
