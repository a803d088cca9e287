"""API v1 module."""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, catalog, contact, products, search, visitors

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(products.router, prefix="/products", tags=["Products"])
api_router.include_router(catalog.router, prefix="/catalog", tags=["Catalog"])
api_router.include_router(search.router, prefix="/search", tags=["Search"])
api_router.include_router(contact.router, prefix="/contact", tags=["Contact"])
api_router.include_router(visitors.router, prefix="/visitors", tags=["Visitors"])
