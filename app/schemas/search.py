"""Site-wide search schemas."""

import datetime as dt
from typing import List, Optional

from pydantic import Field

from app.models.enums import SearchResultType, SearchSort
from app.schemas.catalog import CatalogModel


class SearchItem(CatalogModel):
    """One entry of the mixed search corpus (product, article or page)."""

    id: str
    title: str
    description: str = ""
    type: SearchResultType
    url: str
    category: Optional[str] = None
    date: Optional[dt.date] = None


class SearchState(CatalogModel):
    """Query controls of the search page.

    Changing the query, the type filter or the ordering always returns to the
    first page.
    """

    query: str = ""
    type: Optional[SearchResultType] = None
    sort: SearchSort = SearchSort.RELEVANCE
    page: int = Field(default=1, ge=1)

    def with_query(self, query: str) -> "SearchState":
        return self.model_copy(update={"query": query, "page": 1})

    def with_type(self, result_type: Optional[SearchResultType]) -> "SearchState":
        return self.model_copy(update={"type": result_type, "page": 1})

    def with_sort(self, sort: SearchSort) -> "SearchState":
        return self.model_copy(update={"sort": sort, "page": 1})

    def with_page(self, page: int) -> "SearchState":
        return self.model_copy(update={"page": max(page, 1)})


class SearchPage(CatalogModel):
    """One page of ordered search results."""

    items: List[SearchItem]
    total: int
    page: int
    page_size: int
    total_pages: int
    query: str = ""
    type_counts: dict = {}
