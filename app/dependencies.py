"""FastAPI dependencies for database, catalog source and admin sessions."""

from typing import Annotated, Optional

from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.catalog.sources import CatalogSource, DatabaseCatalogSource, SpreadsheetCatalogSource
from app.config import settings
from app.database import SessionLocal
from app.models import Admin
from app.services.auth_service import AuthService


def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_catalog_source(db: Annotated[Session, Depends(get_db)]) -> CatalogSource:
    """Catalog source selected by ``settings.catalog_source``."""
    if settings.catalog_source == "spreadsheet":
        return SpreadsheetCatalogSource(settings.catalog_spreadsheet_path)
    return DatabaseCatalogSource(db)


def get_session_token(
    token: Annotated[Optional[str], Cookie(alias=settings.session_cookie_name)] = None,
) -> Optional[str]:
    """Raw session token from the session cookie."""
    return token


async def get_current_admin(
    token: Annotated[Optional[str], Depends(get_session_token)],
    db: Annotated[Session, Depends(get_db)],
) -> Admin:
    """Get the admin owning the session cookie."""
    admin = AuthService().get_session_admin(db, token)
    if admin is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return admin


# Common dependency annotations
DbSession = Annotated[Session, Depends(get_db)]
CurrentAdmin = Annotated[Admin, Depends(get_current_admin)]
SessionToken = Annotated[Optional[str], Depends(get_session_token)]
CatalogSourceDep = Annotated[CatalogSource, Depends(get_catalog_source)]
