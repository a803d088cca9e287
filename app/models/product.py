"""Product models for the seed catalog."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship, validates

from app.models.base import BaseModel
from app.models.enums import DifficultyLevel, ProductCategory, Season


class Product(BaseModel):
    """
    Product model representing one seed variety in the catalog.

    Attributes:
        name: Variety name (e.g., "Savaj Hybrid Tomato S-101")
        slug: URL-safe unique identifier derived from the name
        category: Catalog category
        crop_name: Crop the variety belongs to (e.g., "Tomato")
        seasonality: List of season labels
        page_views: Number of times the detail page was served
    """

    __tablename__ = "products"

    # Core fields
    name = Column(String(200), nullable=False)
    slug = Column(String(220), unique=True, nullable=False)
    category = Column(Enum(ProductCategory), nullable=False, default=ProductCategory.OTHER)
    subcategory = Column(String(100), nullable=False, default="General")
    crop_name = Column(String(100), nullable=True)
    description = Column(Text, nullable=False, default="")
    long_description = Column(Text, nullable=True)

    # Agronomic characteristics
    seed_color = Column(String(100), nullable=True)
    morphological_characters = Column(Text, nullable=True)
    flower_color = Column(String(100), nullable=True)
    fruit_shape = Column(String(100), nullable=True)
    plant_height = Column(String(100), nullable=True)
    seasonality = Column(JSON, nullable=False, default=lambda: [Season.ALL_SEASON.value])
    maturity_time = Column(String(100), nullable=False, default="60-80 days")
    yield_expectation = Column(String(100), nullable=False, default="High")
    difficulty_level = Column(
        Enum(DifficultyLevel), nullable=False, default=DifficultyLevel.INTERMEDIATE
    )

    # Growing guide
    planting_instructions = Column(Text, nullable=True)
    care_instructions = Column(Text, nullable=True)
    harvesting_tips = Column(Text, nullable=True)
    storage_guidance = Column(Text, nullable=True)

    # Storefront flags
    availability = Column(Boolean, nullable=False, default=True)
    featured = Column(Boolean, nullable=False, default=False)
    page_views = Column(Integer, nullable=False, default=0)

    # Relationships
    images = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.sort_order",
    )

    # Indexes for performance
    __table_args__ = (
        Index("idx_product_slug", "slug"),
        Index("idx_product_category", "category"),
        Index("idx_product_featured", "featured"),
    )

    @validates("name", "slug")
    def validate_required_fields(self, key, value):
        """Validate required string fields are not empty."""
        if not value or not value.strip():
            raise ValueError(f"{key} cannot be empty")
        return value.strip()

    @validates("seasonality")
    def validate_seasonality(self, key, value):
        """Store canonical season labels; never an empty list."""
        from app.catalog.rules import map_seasons

        return [season.value for season in map_seasons(value)]

    def __repr__(self):
        """String representation of Product."""
        return f"<Product(id={self.id}, slug='{self.slug}', category='{self.category.value}')>"

    @property
    def season_list(self):
        """Seasonality as ``Season`` members."""
        return [Season.lookup(label) or Season.ALL_SEASON for label in self.seasonality or []]

    def to_catalog_product(self):
        """Convert the row into a canonical ``CatalogProduct``.

        Specifications are built from the agronomic columns that hold a value,
        in the same order the spreadsheet normalizer uses.
        """
        from app.catalog.normalizer import build_specifications, order_images
        from app.schemas.catalog import CatalogProduct, ProductImage as CatalogImage

        fields = {
            "seed_color": self.seed_color or "",
            "morphological_characters": self.morphological_characters or "",
            "flower_color": self.flower_color or "",
            "fruit_shape": self.fruit_shape or "",
            "plant_height": self.plant_height or "",
            "maturity_time": self.maturity_time or "",
            "yield_expectation": self.yield_expectation or "",
        }
        images = [
            CatalogImage(
                url=image.url,
                alt_text=image.alt_text or self.name,
                is_primary=image.is_primary,
                sort_order=image.sort_order,
            )
            for image in self.images
        ]

        return CatalogProduct(
            id=self.slug,
            name=self.name,
            category=self.category,
            subcategory=self.subcategory or "General",
            crop_name=self.crop_name or "",
            description=self.description or "",
            long_description=self.long_description or self.description or "",
            specifications=build_specifications(fields),
            seasonality=self.season_list or [Season.ALL_SEASON],
            difficulty_level=self.difficulty_level,
            maturity_time=self.maturity_time,
            yield_expectation=self.yield_expectation,
            availability=self.availability,
            featured=self.featured,
            images=order_images(images),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class ProductImage(BaseModel):
    """
    Image attached to a product.

    Attributes:
        product_id: Foreign key to parent product
        url: Image URL
        is_primary: Whether this is the product's main image
        sort_order: Position in the gallery
    """

    __tablename__ = "product_images"

    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    url = Column(String(500), nullable=False)
    alt_text = Column(String(255), nullable=True)
    is_primary = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)

    product = relationship("Product", back_populates="images")

    __table_args__ = (Index("idx_product_image_product_id", "product_id"),)

    @validates("url")
    def validate_url(self, key, value):
        """Validate url is not empty."""
        if not value or not value.strip():
            raise ValueError("Image url cannot be empty")
        return value.strip()

    def __repr__(self):
        """String representation of ProductImage."""
        return f"<ProductImage(id={self.id}, product_id={self.product_id}, primary={self.is_primary})>"
