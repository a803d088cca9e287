"""Site-wide search over products, articles and static pages."""

import datetime as dt
import json
import math
from collections import Counter
from pathlib import Path
from typing import List, Optional, Sequence, Union

from app.catalog.engine import collation_key
from app.models.enums import SearchResultType, SearchSort
from app.schemas.catalog import CatalogProduct
from app.schemas.search import SearchItem, SearchPage, SearchState
from app.utils.logger import logger

TITLE_WEIGHT = 2
DESCRIPTION_WEIGHT = 1

STATIC_PAGES: List[SearchItem] = [
    SearchItem(
        id="about",
        title="About Savaj Seeds",
        description="Our story, our seed breeding programme and the farmers we serve.",
        type=SearchResultType.PAGE,
        url="/about",
        date=dt.date(2024, 1, 1),
    ),
    SearchItem(
        id="contact",
        title="Contact Us",
        description="Reach our sales and agronomy team for orders and crop advice.",
        type=SearchResultType.PAGE,
        url="/contact",
        date=dt.date(2024, 1, 1),
    ),
    SearchItem(
        id="certifications",
        title="Certifications",
        description="Quality certifications and seed testing standards.",
        type=SearchResultType.PAGE,
        url="/certifications",
        date=dt.date(2024, 1, 1),
    ),
    SearchItem(
        id="calculator",
        title="Seed Rate Calculator",
        description="Estimate how much seed you need for your field area and spacing.",
        type=SearchResultType.PAGE,
        url="/calculator",
        date=dt.date(2024, 1, 1),
    ),
]


def relevance_score(item: SearchItem, query: str) -> int:
    """Two points for a title match, one for a description match (case-insensitive)."""
    needle = (query or "").strip().lower()
    if not needle:
        return 0
    score = 0
    if needle in item.title.lower():
        score += TITLE_WEIGHT
    if needle in (item.description or "").lower():
        score += DESCRIPTION_WEIGHT
    return score


def match_items(items: Sequence[SearchItem], query: str) -> List[SearchItem]:
    """Items whose title, description or category contains ``query``.

    A blank query matches everything. Category-only matches score zero but
    are still returned.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(items)
    return [
        item
        for item in items
        if needle in item.title.lower()
        or needle in (item.description or "").lower()
        or needle in (item.category or "").lower()
    ]


def filter_by_type(
    items: Sequence[SearchItem], result_type: Optional[SearchResultType]
) -> List[SearchItem]:
    if result_type is None:
        return list(items)
    return [item for item in items if item.type == result_type]


def sort_results(items: Sequence[SearchItem], sort: SearchSort, query: str = "") -> List[SearchItem]:
    """Order results; every ordering is stable."""
    if sort == SearchSort.TITLE:
        return sorted(items, key=lambda item: collation_key(item.title))

    if sort == SearchSort.DATE:
        dated = [item for item in items if item.date is not None]
        undated = [item for item in items if item.date is None]
        return sorted(dated, key=lambda item: item.date, reverse=True) + undated

    return sorted(items, key=lambda item: -relevance_score(item, query))


def paginate(items: Sequence[SearchItem], page: int, per_page: int) -> List[SearchItem]:
    """Slice out one 1-based page; pages below 1 are treated as page 1."""
    page = max(page, 1)
    start = (page - 1) * per_page
    return list(items[start : start + per_page])


def run_search(items: Sequence[SearchItem], state: SearchState, per_page: int = 10) -> SearchPage:
    """Match, filter by type, sort and paginate ``items`` for one search request."""
    matched = match_items(items, state.query)
    type_counts = dict(Counter(item.type.value for item in matched))

    results = sort_results(filter_by_type(matched, state.type), state.sort, state.query)
    total = len(results)
    return SearchPage(
        items=paginate(results, state.page, per_page),
        total=total,
        page=state.page,
        page_size=per_page,
        total_pages=math.ceil(total / per_page) if per_page > 0 else 0,
        query=state.query,
        type_counts=type_counts,
    )


def product_to_search_item(product: CatalogProduct) -> SearchItem:
    return SearchItem(
        id=product.id,
        title=product.name,
        description=product.description,
        type=SearchResultType.PRODUCT,
        url=f"/products/{product.id}",
        category=product.category.value,
        date=product.created_at.date(),
    )


def load_articles(path: Union[str, Path]) -> List[SearchItem]:
    """Read blog articles from a JSON index file.

    The file holds a list of objects with ``slug``, ``title``, ``excerpt``,
    ``category`` and ``date`` keys. A missing or unreadable file yields no
    articles.
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"No article index at {path}")
        return []

    try:
        with path.open(encoding="utf-8") as f:
            entries = json.load(f)
        return [
            SearchItem(
                id=entry["slug"],
                title=entry["title"],
                description=entry.get("excerpt") or entry.get("description") or "",
                type=SearchResultType.BLOG,
                url=f"/blog/{entry['slug']}",
                category=entry.get("category"),
                date=entry.get("date"),
            )
            for entry in entries
        ]
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.error(f"Failed to load articles from {path}: {e}")
        return []


def build_corpus(
    products: Sequence[CatalogProduct], articles: Sequence[SearchItem] = ()
) -> List[SearchItem]:
    """Products, then articles, then static pages."""
    return [product_to_search_item(product) for product in products] + list(articles) + STATIC_PAGES
