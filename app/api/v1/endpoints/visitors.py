"""Visitor logging endpoints."""

from fastapi import APIRouter, Query, Request

from app.core.rate_limit import get_client_ip
from app.dependencies import DbSession, CurrentAdmin
from app.schemas.common import PaginatedResponse
from app.schemas.visitor import VisitorLogged, VisitorResponse, VisitorStats
from app.services.visitor_service import VisitorService

router = APIRouter()
visitor_service = VisitorService()


@router.post("", response_model=VisitorLogged)
async def log_visitor(request: Request, db: DbSession) -> VisitorLogged:
    """Record the calling client's visit."""
    visitor_service.log_visit(
        db,
        ip_address=get_client_ip(request),
        user_agent=request.headers.get("user-agent", "Unknown"),
    )
    return VisitorLogged()


@router.get("", response_model=PaginatedResponse[VisitorResponse])
async def list_visitors(
    db: DbSession,
    current_admin: CurrentAdmin,
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
) -> PaginatedResponse[VisitorResponse]:
    """List visitors, newest first (admin only)."""
    visitors = visitor_service.get_multi(db, skip=(page - 1) * page_size, limit=page_size)
    return PaginatedResponse[VisitorResponse].create(
        items=[VisitorResponse.model_validate(v) for v in visitors],
        total=visitor_service.count(db),
        page=page,
        page_size=page_size,
    )


@router.get("/stats", response_model=VisitorStats)
async def visitor_stats(db: DbSession, current_admin: CurrentAdmin) -> VisitorStats:
    """Aggregate visitor counts (admin only)."""
    return visitor_service.get_stats(db)
