"""Contact form schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ContactCreate(BaseModel):
    """Contact form body.

    Fields are optional at the schema level so that a missing field is
    reported with the form's own 400 message rather than a validation error.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    category: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None

    def missing_fields(self):
        """Names of required fields that are absent or blank."""
        required = ("name", "email", "category", "subject", "message")
        return [field for field in required if not (getattr(self, field) or "").strip()]


class ContactSubmitted(BaseModel):
    """Acknowledgement returned after a submission."""

    id: int = Field(..., alias="_id")
    name: str
    email: str
    message: str = "Message sent successfully"

    model_config = {"populate_by_name": True}


class ContactResponse(BaseModel):
    """Stored submission, as listed to admins."""

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    category: str
    subject: str
    message: str
    created_at: datetime

    model_config = {"from_attributes": True}
