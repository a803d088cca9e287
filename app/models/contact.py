"""Contact form submission model."""

from sqlalchemy import Column, String, Text, Index
from sqlalchemy.orm import validates
from app.models.base import BaseModel


class Contact(BaseModel):
    """
    Message submitted through the public contact form.

    Attributes:
        name: Sender name
        email: Sender email (confirmation is sent here)
        phone: Optional phone number
        category: Enquiry category (e.g., "Product Enquiry", "Dealership")
        subject: Message subject
        message: Message body
    """

    __tablename__ = "contacts"

    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    category = Column(String(100), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)

    __table_args__ = (
        Index("idx_contact_email", "email"),
        Index("idx_contact_created_at", "created_at"),
    )

    @validates("name", "email", "category", "subject", "message")
    def validate_required_fields(self, key, value):
        """Validate required string fields are not empty."""
        if not value or not value.strip():
            raise ValueError(f"{key} cannot be empty")
        return value.strip()

    @validates("phone")
    def validate_phone(self, key, value):
        """Clean phone number if provided."""
        return value.strip() if value and value.strip() else None

    def __repr__(self):
        """String representation of Contact."""
        return f"<Contact(id={self.id}, email='{self.email}', subject='{self.subject}')>"
