"""Product service for managing the seed catalog."""

from typing import Optional, List, Dict, Any, Iterable, Mapping
from sqlalchemy import or_, update
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.catalog.fields import slugify
from app.catalog.normalizer import FALLBACK_SLUG, extract_fields, normalize_record
from app.models.enums import ProductCategory
from app.models.product import Product, ProductImage
from app.schemas.catalog import CatalogProduct
from app.schemas.product import ProductImportResult
from app.services.base import BaseService
from app.utils.logger import logger

# Agronomic columns copied verbatim from spreadsheet rows on import
IMPORTED_TEXT_FIELDS = (
    "seed_color",
    "morphological_characters",
    "flower_color",
    "fruit_shape",
    "plant_height",
)


class ProductService(BaseService[Product]):
    """
    Service for managing products in the catalog.

    Provides specialized methods for product management including:
    - Lookup by slug or numeric id
    - Keyword/category/featured listing
    - Merge updates with slug uniqueness
    - Spreadsheet import through the catalog normalizer
    """

    def __init__(self):
        """Initialize product service."""
        super().__init__(Product)

    def get_by_slug(self, db: Session, slug: str) -> Optional[Product]:
        """Find a product by its slug."""
        try:
            return db.query(Product).filter(Product.slug == slug).first()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching product with slug {slug}: {e}")
            raise

    def get_by_id_or_slug(self, db: Session, key: str) -> Optional[Product]:
        """
        Find a product by slug, falling back to the numeric id.

        Args:
            db: Database session
            key: Slug or id as it appears in the URL

        Returns:
            Product instance or None if not found
        """
        product = self.get_by_slug(db, key)
        if product is None and key.isdigit():
            product = self.get(db, int(key))
        return product

    def list_products(
        self,
        db: Session,
        keyword: Optional[str] = None,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> List[Product]:
        """
        List products with optional filters.

        Args:
            db: Database session
            keyword: Case-insensitive substring of the product name
            category: Category label; unknown labels match nothing
            featured: Restrict to featured products when True

        Returns:
            Matching products ordered by name
        """
        try:
            query = db.query(Product)

            if keyword:
                pattern = f"%{keyword.strip()}%"
                query = query.filter(
                    or_(Product.name.ilike(pattern), Product.crop_name.ilike(pattern))
                )

            if category:
                member = ProductCategory.lookup(category)
                if member is None:
                    logger.warning(f"Unknown product category filter {category!r}")
                    return []
                query = query.filter(Product.category == member)

            if featured:
                query = query.filter(Product.featured.is_(True))

            return query.order_by(Product.name, Product.id).all()

        except SQLAlchemyError as e:
            logger.error(f"Error listing products: {e}")
            raise

    def increment_views(self, db: Session, product: Product) -> None:
        """
        Atomically bump the page view counter.

        A failure is logged and swallowed: counting views must never fail the
        read that triggered it.
        """
        try:
            db.execute(
                update(Product)
                .where(Product.id == product.id)
                .values(page_views=Product.page_views + 1)
            )
            db.commit()
            db.refresh(product)
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning(f"Could not increment views for product {product.id}: {e}")

    def resolve_slug(self, db: Session, value: str, exclude_id: Optional[int] = None) -> str:
        """
        Slugify ``value`` and check it is free.

        Raises:
            ValueError: If another product already uses the slug
        """
        slug = slugify(value) or FALLBACK_SLUG
        query = db.query(Product.id).filter(Product.slug == slug)
        if exclude_id is not None:
            query = query.filter(Product.id != exclude_id)
        if query.first() is not None:
            raise ValueError("Product with this slug already exists")
        return slug

    def create_product(self, db: Session, data: Dict[str, Any]) -> Product:
        """
        Create a product; the slug comes from ``slug`` or else ``name``.

        Raises:
            ValueError: If the slug is taken
        """
        data = dict(data)
        images = data.pop("images", None) or []
        data["slug"] = self.resolve_slug(db, data.get("slug") or data["name"])

        try:
            product = Product(**data)
            product.images = self._build_images(images, product.name)
            db.add(product)
            db.commit()
            db.refresh(product)

            logger.info(f"Created product {product.slug} with id {product.id}")
            return product

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating product: {e}")
            raise

    def update_product(self, db: Session, product: Product, data: Dict[str, Any]) -> Product:
        """
        Merge ``data`` into ``product``; keys that are absent or None keep the stored value.

        Raises:
            ValueError: If a new slug is taken
        """
        changes = {key: value for key, value in data.items() if value is not None}
        images = changes.pop("images", None)

        if "slug" in changes:
            changes["slug"] = self.resolve_slug(db, changes["slug"], exclude_id=product.id)

        if images is not None:
            product.images = self._build_images(images, changes.get("name", product.name))

        return self.update(db, product, changes)

    def import_records(
        self, db: Session, records: Iterable[Mapping[str, Any]]
    ) -> ProductImportResult:
        """
        Upsert spreadsheet rows into the products table.

        Every row goes through the catalog normalizer. Rows without a product
        name are skipped; rows whose slug already exists update that product.
        A failing row is rolled back and reported without stopping the import.

        Args:
            db: Database session
            records: Raw spreadsheet rows

        Returns:
            Import counters and per-row error messages
        """
        result = ProductImportResult()

        for position, record in enumerate(records, start=1):
            result.total_rows += 1
            try:
                product = normalize_record(record)
                if product is None:
                    result.skipped += 1
                    continue

                data = self._catalog_product_to_row(product, extract_fields(record))
                existing = self.get_by_slug(db, product.id)
                if existing is None:
                    self.create_product(db, data)
                    result.imported += 1
                else:
                    data.pop("slug")
                    if not data.get("images"):
                        data.pop("images")
                    self.update_product(db, existing, data)
                    result.updated += 1

            except (ValueError, SQLAlchemyError) as e:
                db.rollback()
                logger.error(f"Import failed at row {position}: {e}")
                result.errors.append(f"Row {position}: {e}")

        logger.info(
            f"Imported products: {result.imported} new, {result.updated} updated, "
            f"{result.skipped} skipped, {len(result.errors)} errors"
        )
        return result

    def _catalog_product_to_row(
        self, product: CatalogProduct, fields: Mapping[str, str]
    ) -> Dict[str, Any]:
        row = {
            "name": product.name,
            "slug": product.id,
            "category": product.category,
            "subcategory": product.subcategory,
            "crop_name": product.crop_name or None,
            "description": product.description,
            "long_description": product.long_description,
            "seasonality": [season.value for season in product.seasonality],
            "maturity_time": product.maturity_time,
            "yield_expectation": product.yield_expectation,
            "difficulty_level": product.difficulty_level,
            "availability": product.availability,
            "featured": product.featured,
            "images": [image.model_dump() for image in product.images],
        }
        for field in IMPORTED_TEXT_FIELDS:
            row[field] = fields.get(field) or None
        return row

    def _build_images(self, images: List[Any], name: str) -> List[ProductImage]:
        """Image rows with at most one primary, defaulting to the first image."""
        entries = [
            image if isinstance(image, dict) else image.model_dump() for image in images
        ]
        primary_index = next(
            (index for index, entry in enumerate(entries) if entry.get("is_primary")), 0
        )
        return [
            ProductImage(
                url=entry["url"],
                alt_text=entry.get("alt_text") or name,
                is_primary=index == primary_index,
                sort_order=index if entry.get("sort_order") is None else entry["sort_order"],
            )
            for index, entry in enumerate(entries)
        ]
