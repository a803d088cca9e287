"""Product management endpoints."""

from typing import Optional, List

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from app.catalog.sources import read_spreadsheet
from app.dependencies import DbSession, CurrentAdmin
from app.schemas.common import Message
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductSummary,
    ProductDetail,
    ProductImportResult,
)
from app.services.product_service import ProductService
from app.utils.logger import logger

router = APIRouter()
product_service = ProductService()

ALLOWED_IMPORT_SUFFIXES = (".xlsx", ".xlsm", ".xls", ".csv")


@router.get("", response_model=List[ProductSummary])
async def list_products(
    db: DbSession,
    keyword: Optional[str] = None,
    category: Optional[str] = None,
    featured: Optional[bool] = None,
) -> List[ProductSummary]:
    """List products, optionally filtered by name keyword, category and featured flag."""
    products = product_service.list_products(
        db, keyword=keyword, category=category, featured=featured
    )
    return [ProductSummary.model_validate(p) for p in products]


@router.post("/import", response_model=ProductImportResult)
async def import_products(
    db: DbSession,
    current_admin: CurrentAdmin,
    file: UploadFile = File(...),
) -> ProductImportResult:
    """Bulk create or update products from an Excel/CSV spreadsheet (admin only)."""
    filename = file.filename or ""
    if not filename.lower().endswith(ALLOWED_IMPORT_SUFFIXES):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid file type. Allowed types: {', '.join(ALLOWED_IMPORT_SUFFIXES)}",
        )

    try:
        records = read_spreadsheet(file.file, filename=filename)
    except Exception as e:
        logger.error(f"Could not read uploaded spreadsheet {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not read spreadsheet",
        )

    logger.info(f"Admin {current_admin.email} importing {len(records)} rows from {filename}")
    return product_service.import_records(db, records)


@router.get("/{id_or_slug}", response_model=ProductDetail)
async def get_product(id_or_slug: str, db: DbSession) -> ProductDetail:
    """Get a product by slug or id and count the view."""
    product = product_service.get_by_id_or_slug(db, id_or_slug)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    product_service.increment_views(db, product)
    return ProductDetail.model_validate(product)


@router.post("", response_model=ProductDetail, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    db: DbSession,
    current_admin: CurrentAdmin,
) -> ProductDetail:
    """Create a new product (admin only)."""
    try:
        product = product_service.create_product(db, product_in.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ProductDetail.model_validate(product)


@router.put("/{product_id}", response_model=ProductDetail)
async def update_product(
    product_id: int,
    product_in: ProductUpdate,
    db: DbSession,
    current_admin: CurrentAdmin,
) -> ProductDetail:
    """Update a product (admin only); omitted fields are left unchanged."""
    product = product_service.get(db, product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    try:
        product = product_service.update_product(
            db, product, product_in.model_dump(exclude_unset=True)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return ProductDetail.model_validate(product)


@router.delete("/{product_id}", response_model=Message)
async def delete_product(
    product_id: int,
    db: DbSession,
    current_admin: CurrentAdmin,
) -> Message:
    """Delete a product (admin only)."""
    if not product_service.delete(db, product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )

    return Message(message="Product removed")
