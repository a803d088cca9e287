"""Services for the seed catalog backend."""

from .base import BaseService
from .product_service import ProductService
from .contact_service import ContactService
from .auth_service import AuthService
from .visitor_service import VisitorService

__all__ = [
    "BaseService",
    "ProductService",
    "ContactService",
    "AuthService",
    "VisitorService",
]
