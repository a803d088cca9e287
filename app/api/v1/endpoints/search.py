"""Site-wide search endpoint."""

from typing import Optional

from fastapi import APIRouter, Query

from app.catalog.search import build_corpus, load_articles, run_search
from app.catalog.sources import get_all_products
from app.config import settings
from app.dependencies import CatalogSourceDep
from app.models.enums import SearchResultType, SearchSort
from app.schemas.search import SearchPage, SearchState
from app.utils.logger import logger

router = APIRouter()


@router.get("", response_model=SearchPage)
async def search(
    source: CatalogSourceDep,
    q: str = "",
    type: Optional[str] = None,
    sort: Optional[str] = None,
    page: int = Query(1, ge=1),
) -> SearchPage:
    """Search products, articles and pages."""
    result_type = SearchResultType.lookup(type) if type else None
    if type and result_type is None:
        logger.warning(f"Ignoring unknown search type {type!r}")

    search_sort = SearchSort.lookup(sort) if sort else SearchSort.RELEVANCE
    if search_sort is None:
        logger.warning(f"Ignoring unknown search sort {sort!r}")
        search_sort = SearchSort.RELEVANCE

    state = SearchState(query=q.strip(), type=result_type, sort=search_sort, page=page)
    corpus = build_corpus(get_all_products(source), load_articles(settings.articles_path))
    return run_search(corpus, state, per_page=settings.search_results_per_page)
