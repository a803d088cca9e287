"""Canonical catalog schemas shared by the normalizer and the filter engine."""

from datetime import datetime
from typing import Dict, FrozenSet, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.enums import (
    DifficultyLevel,
    ProductCategory,
    Season,
    SortDirection,
    SortField,
    SpecificationCategory,
)
from app.utils.logger import logger


class CatalogModel(BaseModel):
    """Immutable value object serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        from_attributes=True,
    )


class ProductSpecification(CatalogModel):
    """One row of a product's specification table."""

    id: str
    name: str
    value: str
    category: SpecificationCategory


class ProductImage(CatalogModel):
    """Product image reference."""

    url: str
    alt_text: str = ""
    is_primary: bool = False
    sort_order: int = 0


class CatalogProduct(CatalogModel):
    """Canonical product consumed by the catalog engine and the storefront."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: ProductCategory
    subcategory: str = "General"
    crop_name: str = ""
    description: str = ""
    long_description: str = ""
    specifications: List[ProductSpecification] = []
    seasonality: List[Season] = Field(default_factory=lambda: [Season.ALL_SEASON], min_length=1)
    difficulty_level: DifficultyLevel = DifficultyLevel.INTERMEDIATE
    maturity_time: str = ""
    yield_expectation: str = ""
    availability: bool = True
    featured: bool = False
    images: List[ProductImage] = []
    created_at: datetime
    updated_at: datetime

    @property
    def primary_image(self) -> Optional[ProductImage]:
        """First image, which is the primary one when a primary exists."""
        return self.images[0] if self.images else None


class FilterState(CatalogModel):
    """Active facet selections; an empty facet means no restriction."""

    categories: FrozenSet[ProductCategory] = frozenset()
    seasons: FrozenSet[Season] = frozenset()
    difficulty_levels: FrozenSet[DifficultyLevel] = frozenset()
    availability: Optional[bool] = None
    featured: Optional[bool] = None

    @property
    def is_active(self) -> bool:
        """Whether any facet restricts the catalog."""
        return bool(
            self.categories
            or self.seasons
            or self.difficulty_levels
            or self.availability
            or self.featured
        )

    @classmethod
    def from_params(
        cls,
        categories: Optional[Iterable[str]] = None,
        seasons: Optional[Iterable[str]] = None,
        difficulty_levels: Optional[Iterable[str]] = None,
        availability: Optional[bool] = None,
        featured: Optional[bool] = None,
    ) -> "FilterState":
        """Build a filter state from raw query values, dropping unknown labels."""
        return cls(
            categories=_parse_labels(ProductCategory, categories),
            seasons=_parse_labels(Season, seasons),
            difficulty_levels=_parse_labels(DifficultyLevel, difficulty_levels),
            availability=availability,
            featured=featured,
        )


class SortSpec(CatalogModel):
    """Sort key and direction."""

    field: SortField = SortField.NAME
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def from_params(cls, field: Optional[str] = None, direction: Optional[str] = None) -> "SortSpec":
        """Build a sort spec, falling back to the defaults for unknown values."""
        sort_field = SortField.lookup(field) if field else SortField.NAME
        if sort_field is None:
            logger.warning(f"Ignoring unknown sort field {field!r}")
            sort_field = SortField.NAME

        sort_direction = SortDirection.lookup(direction) if direction else SortDirection.ASC
        if sort_direction is None:
            logger.warning(f"Ignoring unknown sort direction {direction!r}")
            sort_direction = SortDirection.ASC

        return cls(field=sort_field, direction=sort_direction)


class FilterStats(CatalogModel):
    """Counts that drive the "N of M products" text and facet badges."""

    total_products: int
    filtered_count: int
    available_count: int = 0
    featured_count: int = 0
    category_stats: Dict[str, int] = {}
    season_stats: Dict[str, int] = {}
    difficulty_stats: Dict[str, int] = {}


class CatalogView(CatalogModel):
    """Filtered, sorted catalog plus statistics."""

    products: List[CatalogProduct]
    stats: FilterStats
    filters: FilterState
    sort: SortSpec


class ComparisonRow(CatalogModel):
    """One labelled row of a side-by-side comparison."""

    label: str
    values: List[str]


class ComparisonTable(CatalogModel):
    """Side-by-side comparison of up to three products."""

    product_ids: List[str]
    product_names: List[str]
    rows: List[ComparisonRow]
    specification_rows: List[ComparisonRow]


def _parse_labels(enum_cls, labels):
    """Map raw labels onto enum members, skipping unknown ones."""
    members = set()
    for label in labels or []:
        member = enum_cls.lookup(label)
        if member is None:
            logger.warning(f"Ignoring unknown {enum_cls.__name__} filter value {label!r}")
            continue
        members.add(member)
    return frozenset(members)
