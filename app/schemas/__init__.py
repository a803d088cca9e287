"""Pydantic schemas for request/response validation."""

from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    AdminResponse,
)
from app.schemas.catalog import (
    CatalogProduct,
    CatalogView,
    ComparisonTable,
    FilterState,
    FilterStats,
    SortSpec,
)
from app.schemas.common import (
    Message,
    PaginatedResponse,
)
from app.schemas.contact import ContactCreate, ContactResponse, ContactSubmitted
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductSummary,
    ProductDetail,
    ProductImportResult,
)
from app.schemas.search import SearchItem, SearchPage, SearchState
from app.schemas.visitor import VisitorLogged, VisitorResponse, VisitorStats

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "AdminResponse",
    # Catalog
    "CatalogProduct",
    "CatalogView",
    "ComparisonTable",
    "FilterState",
    "FilterStats",
    "SortSpec",
    # Common
    "Message",
    "PaginatedResponse",
    # Contact
    "ContactCreate",
    "ContactResponse",
    "ContactSubmitted",
    # Products
    "ProductCreate",
    "ProductUpdate",
    "ProductSummary",
    "ProductDetail",
    "ProductImportResult",
    # Search
    "SearchItem",
    "SearchPage",
    "SearchState",
    # Visitors
    "VisitorLogged",
    "VisitorResponse",
    "VisitorStats",
]
