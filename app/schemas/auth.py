"""Authentication schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Login request body."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class AdminResponse(BaseModel):
    """Admin account response schema."""

    id: int
    email: str
    name: Optional[str] = None
    active: bool
    last_login_at: Optional[datetime] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """Successful login; the session itself travels in the cookie."""

    message: str = "Logged in"
    admin: AdminResponse
    expires_at: datetime
