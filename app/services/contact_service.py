"""Contact form submissions."""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.contact import Contact
from app.schemas.contact import ContactCreate
from app.services.base import BaseService

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"


class ContactService(BaseService[Contact]):
    """Service for storing and listing contact form messages."""

    def __init__(self):
        """Initialize contact service."""
        super().__init__(Contact)

    def submit(self, db: Session, form: ContactCreate) -> Contact:
        """
        Validate and store a contact form submission.

        Raises:
            ValueError: If a required field is missing or blank
        """
        if form.missing_fields():
            raise ValueError(REQUIRED_FIELDS_MESSAGE)

        return self.create(db, form.model_dump())

    def list_recent(self, db: Session, skip: int = 0, limit: int = 50) -> List[Contact]:
        """Submissions, newest first."""
        return self.get_multi(db, skip=skip, limit=limit)

    def find_by_email(self, db: Session, email: str) -> Optional[Contact]:
        return (
            db.query(Contact)
            .filter(Contact.email == email.strip())
            .order_by(Contact.created_at.desc())
            .first()
        )
