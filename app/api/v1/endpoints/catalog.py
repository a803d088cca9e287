"""Storefront catalog endpoints: filtered listing and comparison."""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Query

from app.catalog.compare import build_comparison
from app.catalog.engine import query_catalog
from app.catalog.sources import get_all_products
from app.dependencies import CatalogSourceDep
from app.schemas.catalog import CatalogView, ComparisonTable, FilterState, SortSpec

router = APIRouter()


def split_values(values: Optional[List[str]]) -> List[str]:
    """Accept both repeated parameters and comma-separated lists."""
    return [part.strip() for value in values or [] for part in value.split(",") if part.strip()]


@router.get("", response_model=CatalogView)
async def browse_catalog(
    source: CatalogSourceDep,
    categories: Annotated[Optional[List[str]], Query()] = None,
    seasons: Annotated[Optional[List[str]], Query()] = None,
    difficulty: Annotated[Optional[List[str]], Query()] = None,
    availability: Optional[bool] = None,
    featured: Optional[bool] = None,
    sort: Optional[str] = None,
    direction: Optional[str] = None,
) -> CatalogView:
    """Filtered and sorted catalog with facet statistics.

    Unknown facet values and sort options are ignored rather than rejected.
    """
    filters = FilterState.from_params(
        categories=split_values(categories),
        seasons=split_values(seasons),
        difficulty_levels=split_values(difficulty),
        availability=availability,
        featured=featured,
    )
    return query_catalog(get_all_products(source), filters, SortSpec.from_params(sort, direction))


@router.get("/compare", response_model=ComparisonTable)
async def compare_products(
    source: CatalogSourceDep,
    ids: Annotated[Optional[List[str]], Query()] = None,
) -> ComparisonTable:
    """Side-by-side comparison of up to three products, in the order requested."""
    by_id = {product.id: product for product in get_all_products(source)}
    selected = [by_id[product_id] for product_id in split_values(ids) if product_id in by_id]
    return build_comparison(selected)
