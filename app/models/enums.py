"""Enum types for database models and the catalog engine."""

import enum
from typing import Optional


class _LabelEnum(str, enum.Enum):
    """String enum that can be looked up case-insensitively by its label."""

    @classmethod
    def lookup(cls, label) -> Optional["_LabelEnum"]:
        """Return the member whose value matches ``label`` ignoring case, else None."""
        if isinstance(label, cls):
            return label
        if label is None:
            return None
        text = str(label).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return None


class ProductCategory(_LabelEnum):
    """Closed set of catalog categories."""

    VEGETABLE = "Vegetable"
    CROP = "Crop"
    HYBRID = "Hybrid"
    COTTON = "Cotton"
    WHEAT = "Wheat"
    GROUNDNUT = "Groundnut"
    CUMIN = "Cumin"
    SESAME = "Sesame"
    CASTOR = "Castor"
    MAIZE = "Maize"
    GRAM = "Gram"
    PIGEON_PEA = "Pigeon Pea"
    MILLET = "Millet"
    CORIANDER = "Coriander"
    OTHER = "Other"

    @classmethod
    def coerce(cls, label) -> "ProductCategory":
        """Map any label to a category, falling back to Other."""
        return cls.lookup(label) or cls.OTHER


class Season(_LabelEnum):
    """Controlled season vocabulary."""

    MONSOON = "Monsoon"
    WINTER = "Winter"
    SUMMER = "Summer"
    ALL_SEASON = "All-Season"
    SPRING = "Spring"


class DifficultyLevel(_LabelEnum):
    """How demanding a variety is to grow."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class SpecificationCategory(_LabelEnum):
    """Grouping of a product specification row."""

    BASIC = "Basic"
    GROWING = "Growing"
    HARVEST = "Harvest"


class SortField(_LabelEnum):
    """Sortable catalog fields."""

    NAME = "name"
    CATEGORY = "category"
    CREATED_AT = "createdAt"
    FEATURED = "featured"


class SortDirection(_LabelEnum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class SearchResultType(_LabelEnum):
    """Kinds of items in the site-wide search corpus."""

    PRODUCT = "product"
    BLOG = "blog"
    PAGE = "page"


class SearchSort(_LabelEnum):
    """Orderings offered by the site-wide search."""

    RELEVANCE = "relevance"
    DATE = "date"
    TITLE = "title"
