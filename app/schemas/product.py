"""Product schemas for request/response validation."""

from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator

from app.models.enums import DifficultyLevel, ProductCategory


class ProductImageIn(BaseModel):
    """Image reference supplied when creating or updating a product."""

    url: str = Field(..., min_length=1, max_length=500)
    alt_text: Optional[str] = Field(None, max_length=255)
    is_primary: bool = False
    sort_order: Optional[int] = Field(default=None, ge=0)  # list position when omitted


class ProductImageResponse(BaseModel):
    """Product image response schema."""

    id: int
    url: str
    alt_text: Optional[str] = None
    is_primary: bool = False
    sort_order: int = 0

    model_config = {"from_attributes": True}


class ProductBase(BaseModel):
    """Base product schema."""

    name: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=220)  # derived from name when omitted
    category: ProductCategory = ProductCategory.OTHER
    subcategory: str = Field(default="General", max_length=100)
    crop_name: Optional[str] = Field(None, max_length=100)
    description: str = ""
    long_description: Optional[str] = None
    seed_color: Optional[str] = Field(None, max_length=100)
    morphological_characters: Optional[str] = None
    flower_color: Optional[str] = Field(None, max_length=100)
    fruit_shape: Optional[str] = Field(None, max_length=100)
    plant_height: Optional[str] = Field(None, max_length=100)
    seasonality: List[str] = Field(default_factory=lambda: ["All-Season"])
    maturity_time: str = Field(default="60-80 days", max_length=100)
    yield_expectation: str = Field(default="High", max_length=100)
    difficulty_level: DifficultyLevel = DifficultyLevel.INTERMEDIATE
    planting_instructions: Optional[str] = None
    care_instructions: Optional[str] = None
    harvesting_tips: Optional[str] = None
    storage_guidance: Optional[str] = None
    availability: bool = True
    featured: bool = False

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v):
        """Accept category labels in any case; unknown labels become Other."""
        return ProductCategory.coerce(v)


class ProductCreate(ProductBase):
    """Schema for creating a product."""

    images: List[ProductImageIn] = []


class ProductUpdate(BaseModel):
    """Schema for updating a product; omitted fields keep their stored values."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=220)
    category: Optional[ProductCategory] = None
    subcategory: Optional[str] = Field(None, max_length=100)
    crop_name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    long_description: Optional[str] = None
    seed_color: Optional[str] = Field(None, max_length=100)
    morphological_characters: Optional[str] = None
    flower_color: Optional[str] = Field(None, max_length=100)
    fruit_shape: Optional[str] = Field(None, max_length=100)
    plant_height: Optional[str] = Field(None, max_length=100)
    seasonality: Optional[List[str]] = None
    maturity_time: Optional[str] = Field(None, max_length=100)
    yield_expectation: Optional[str] = Field(None, max_length=100)
    difficulty_level: Optional[DifficultyLevel] = None
    planting_instructions: Optional[str] = None
    care_instructions: Optional[str] = None
    harvesting_tips: Optional[str] = None
    storage_guidance: Optional[str] = None
    availability: Optional[bool] = None
    featured: Optional[bool] = None
    images: Optional[List[ProductImageIn]] = None

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v):
        """Accept category labels in any case; unknown labels become Other."""
        return ProductCategory.coerce(v) if v is not None else None


class ProductSummary(BaseModel):
    """Product list entry (no long description or growing guide)."""

    id: int
    name: str
    slug: str
    category: ProductCategory
    subcategory: str
    crop_name: Optional[str] = None
    description: str
    seasonality: List[str]
    maturity_time: str
    yield_expectation: str
    difficulty_level: DifficultyLevel
    availability: bool
    featured: bool
    images: List[ProductImageResponse] = []
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("images")
    @classmethod
    def primary_image_first(cls, v):
        """Primary image first, the rest by sort_order."""
        return sorted(v, key=lambda image: (not image.is_primary, image.sort_order))


class ProductDetail(ProductSummary):
    """Full product detail."""

    long_description: Optional[str] = None
    seed_color: Optional[str] = None
    morphological_characters: Optional[str] = None
    flower_color: Optional[str] = None
    fruit_shape: Optional[str] = None
    plant_height: Optional[str] = None
    planting_instructions: Optional[str] = None
    care_instructions: Optional[str] = None
    harvesting_tips: Optional[str] = None
    storage_guidance: Optional[str] = None
    page_views: int = 0
    updated_at: Optional[datetime] = None


class ProductImportResult(BaseModel):
    """Result of a spreadsheet import."""

    total_rows: int = 0
    imported: int = 0
    updated: int = 0
    skipped: int = 0
    errors: List[str] = []
