"""Database models for the seed catalog."""

# Import all models
from app.models.base import BaseModel
from app.models.enums import (
    ProductCategory,
    Season,
    DifficultyLevel,
    SpecificationCategory,
    SortField,
    SortDirection,
    SearchResultType,
    SearchSort,
)
from app.models.product import Product, ProductImage
from app.models.contact import Contact
from app.models.admin import Admin, AdminSession
from app.models.visitor import Visitor

__all__ = [
    # Base
    "BaseModel",
    # Enums
    "ProductCategory",
    "Season",
    "DifficultyLevel",
    "SpecificationCategory",
    "SortField",
    "SortDirection",
    "SearchResultType",
    "SearchSort",
    # Models
    "Product",
    "ProductImage",
    "Contact",
    "Admin",
    "AdminSession",
    "Visitor",
]
