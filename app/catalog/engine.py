"""Filtering, sorting and statistics over a canonical catalog.

Every function here is pure: inputs are never mutated and each call returns
new lists, so one catalog snapshot can serve concurrent requests.
"""

import unicodedata
from collections import Counter
from typing import Callable, Dict, List, Sequence

from app.models.enums import SortDirection, SortField
from app.schemas.catalog import CatalogProduct, CatalogView, FilterState, FilterStats, SortSpec


def collation_key(text: str):
    """Locale-style sort key: accents and case are ignored, then the raw text breaks ties."""
    decomposed = unicodedata.normalize("NFKD", text or "")
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return (folded, text or "")


def matches_filters(product: CatalogProduct, filters: FilterState) -> bool:
    """AND across facets, OR within a facet; an empty facet lets everything through."""
    if filters.categories and product.category not in filters.categories:
        return False

    if filters.seasons and not any(season in filters.seasons for season in product.seasonality):
        return False

    if filters.difficulty_levels and product.difficulty_level not in filters.difficulty_levels:
        return False

    # Flags only ever narrow to products that have them
    if filters.availability and not product.availability:
        return False

    if filters.featured and not product.featured:
        return False

    return True


def apply_filters(products: Sequence[CatalogProduct], filters: FilterState) -> List[CatalogProduct]:
    """Products passing every active facet, in input order."""
    return [product for product in products if matches_filters(product, filters)]


SORT_KEYS: Dict[SortField, Callable[[CatalogProduct], object]] = {
    SortField.NAME: lambda product: collation_key(product.name),
    SortField.CATEGORY: lambda product: collation_key(product.category.value),
    SortField.CREATED_AT: lambda product: product.created_at,
    SortField.FEATURED: lambda product: product.featured,
}


def apply_sort(products: Sequence[CatalogProduct], sort: SortSpec) -> List[CatalogProduct]:
    """Stable sort; products with equal keys keep their input order in either direction."""
    key = SORT_KEYS.get(sort.field, SORT_KEYS[SortField.NAME])
    return sorted(products, key=key, reverse=sort.direction == SortDirection.DESC)


def compute_stats(
    products: Sequence[CatalogProduct], filtered: Sequence[CatalogProduct]
) -> FilterStats:
    """Catalog-wide facet counts plus the size of the filtered view."""
    seasons = Counter(season.value for product in products for season in product.seasonality)
    return FilterStats(
        total_products=len(products),
        filtered_count=len(filtered),
        available_count=sum(1 for product in products if product.availability),
        featured_count=sum(1 for product in products if product.featured),
        category_stats=dict(Counter(product.category.value for product in products)),
        season_stats=dict(seasons),
        difficulty_stats=dict(Counter(product.difficulty_level.value for product in products)),
    )


def query_catalog(
    products: Sequence[CatalogProduct],
    filters: FilterState = FilterState(),
    sort: SortSpec = SortSpec(),
) -> CatalogView:
    """Filter, then sort, then compute statistics for one catalog request."""
    filtered = apply_filters(products, filters)
    return CatalogView(
        products=apply_sort(filtered, sort),
        stats=compute_stats(products, filtered),
        filters=filters,
        sort=sort,
    )
