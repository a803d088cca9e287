"""Contact form endpoints."""

from typing import List

from fastapi import APIRouter, BackgroundTasks, HTTPException, Query, Request, status

from app.core.rate_limit import limiter
from app.dependencies import DbSession, CurrentAdmin
from app.schemas.common import PaginatedResponse
from app.schemas.contact import ContactCreate, ContactResponse, ContactSubmitted
from app.services.contact_service import ContactService
from app.services.email_service import send_contact_confirmation

router = APIRouter()
contact_service = ContactService()


@router.post("", response_model=ContactSubmitted, status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")
async def submit_contact(
    request: Request,
    form: ContactCreate,
    background_tasks: BackgroundTasks,
    db: DbSession,
) -> ContactSubmitted:
    """Store a contact message and email the sender a confirmation."""
    try:
        contact = contact_service.submit(db, form)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    background_tasks.add_task(send_contact_confirmation, contact)

    return ContactSubmitted(id=contact.id, name=contact.name, email=contact.email)


@router.get("", response_model=PaginatedResponse[ContactResponse])
async def list_contacts(
    db: DbSession,
    current_admin: CurrentAdmin,
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=100),
) -> PaginatedResponse[ContactResponse]:
    """List contact submissions, newest first (admin only)."""
    contacts = contact_service.list_recent(db, skip=(page - 1) * page_size, limit=page_size)
    return PaginatedResponse[ContactResponse].create(
        items=[ContactResponse.model_validate(c) for c in contacts],
        total=contact_service.count(db),
        page=page,
        page_size=page_size,
    )
