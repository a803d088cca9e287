"""Tests for site-wide search."""

import datetime as dt
import json

import pytest

from app.catalog.search import (
    STATIC_PAGES,
    build_corpus,
    load_articles,
    match_items,
    paginate,
    product_to_search_item,
    relevance_score,
    run_search,
    sort_results,
)
from app.models.enums import SearchResultType, SearchSort
from app.schemas.search import SearchItem, SearchState


def item(title, description="", type=SearchResultType.PRODUCT, category=None, date=None):
    return SearchItem(
        id=title.lower().replace(" ", "-"),
        title=title,
        description=description,
        type=type,
        url="/x",
        category=category,
        date=date,
    )


@pytest.fixture
def corpus():
    return [
        item("Premium Seeds", "Grow great tomato crops", category="Vegetable Seeds", date=dt.date(2024, 1, 15)),
        item("Tomato Hybrid", "High yield", category="Vegetable Seeds", date=dt.date(2024, 1, 10)),
        item("Cucumber", "Crisp", category="Tomato Partners"),
        item("Tomato Guide", "Tomato growing tips", type=SearchResultType.BLOG, date=dt.date(2024, 1, 20)),
        item("About Us", "Our story", type=SearchResultType.PAGE, date=dt.date(2024, 1, 1)),
    ]


class TestRelevance:
    """Test relevance scoring and matching."""

    def test_title_outranks_description(self):
        """Test a title match scores above a description-only match."""
        assert relevance_score(item("Tomato Hybrid"), "tomato") == 2
        assert relevance_score(item("Premium", "tomato crops"), "tomato") == 1
        assert relevance_score(item("Tomato Guide", "Tomato tips"), "TOMATO") == 3

    def test_blank_query_scores_zero(self):
        assert relevance_score(item("Tomato"), "  ") == 0

    def test_category_only_match_included(self, corpus):
        """Test items matching only by category are kept with score zero."""
        matched = match_items(corpus, "tomato")
        titles = [i.title for i in matched]
        assert "Cucumber" in titles
        assert relevance_score(corpus[2], "tomato") == 0
        assert "About Us" not in titles

    def test_blank_query_matches_everything(self, corpus):
        assert match_items(corpus, "") == corpus

    def test_relevance_ranking_scenario(self):
        """Test a title match ranks before a description-only match."""
        a = item("Premium Seeds", "great for tomato")
        b = item("Tomato Hybrid", "")
        assert [i.title for i in sort_results([a, b], SearchSort.RELEVANCE, "tomato")] == [
            "Tomato Hybrid",
            "Premium Seeds",
        ]


class TestSorting:
    """Test result orderings."""

    def test_relevance_is_stable(self, corpus):
        results = sort_results(match_items(corpus, "tomato"), SearchSort.RELEVANCE, "tomato")
        assert [i.title for i in results] == ["Tomato Guide", "Tomato Hybrid", "Premium Seeds", "Cucumber"]

    def test_date_newest_first_missing_last(self, corpus):
        results = sort_results(corpus, SearchSort.DATE)
        assert [i.title for i in results] == [
            "Tomato Guide",
            "Premium Seeds",
            "Tomato Hybrid",
            "About Us",
            "Cucumber",
        ]

    def test_title(self, corpus):
        results = sort_results(corpus, SearchSort.TITLE)
        assert [i.title for i in results][:2] == ["About Us", "Cucumber"]


class TestPagination:
    """Test pagination and search state."""

    def test_paginate(self):
        items = [item(f"Item {n}") for n in range(25)]
        assert len(paginate(items, 1, 10)) == 10
        assert len(paginate(items, 3, 10)) == 5
        assert paginate(items, 4, 10) == []
        assert paginate(items, 0, 10) == paginate(items, 1, 10)

    def test_state_transitions_reset_page(self):
        state = SearchState(query="okra", page=3)
        assert state.with_query("tomato").page == 1
        assert state.with_type(SearchResultType.BLOG).page == 1
        assert state.with_sort(SearchSort.TITLE).page == 1
        assert state.with_page(2).page == 2
        assert state.page == 3

    def test_run_search(self, corpus):
        state = SearchState(query="tomato", type=SearchResultType.PRODUCT)
        page = run_search(corpus, state, per_page=2)
        assert page.total == 3
        assert page.total_pages == 2
        assert [i.title for i in page.items] == ["Tomato Hybrid", "Premium Seeds"]
        assert page.type_counts == {"product": 3, "blog": 1}

    def test_run_search_no_results(self, corpus):
        page = run_search(corpus, SearchState(query="zzz"))
        assert page.items == []
        assert page.total == 0
        assert page.total_pages == 0


class TestCorpus:
    """Test corpus building."""

    def test_product_item(self, catalog_products):
        entry = product_to_search_item(catalog_products[0])
        assert entry.type == SearchResultType.PRODUCT
        assert entry.url == "/products/hybrid-maize-seeds"
        assert entry.category == "Maize"

    def test_build_corpus_order(self, catalog_products):
        articles = [item("Guide", type=SearchResultType.BLOG)]
        corpus = build_corpus(catalog_products, articles)
        assert len(corpus) == len(catalog_products) + 1 + len(STATIC_PAGES)
        assert corpus[len(catalog_products)].title == "Guide"

    def test_load_articles(self, tmp_path):
        path = tmp_path / "articles.json"
        path.write_text(
            json.dumps([{"slug": "kharif", "title": "Kharif Tips", "excerpt": "Sow early", "date": "2024-06-01"}]),
            encoding="utf-8",
        )
        articles = load_articles(path)
        assert articles[0].url == "/blog/kharif"
        assert articles[0].date == dt.date(2024, 6, 1)
        assert articles[0].type == SearchResultType.BLOG

    def test_load_articles_missing_or_broken(self, tmp_path):
        assert load_articles(tmp_path / "missing.json") == []
        broken = tmp_path / "broken.json"
        broken.write_text("{not json", encoding="utf-8")
        assert load_articles(broken) == []
