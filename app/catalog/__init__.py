"""Catalog normalization, filtering, search and comparison."""

from app.catalog.compare import add_to_comparison, build_comparison
from app.catalog.engine import apply_filters, apply_sort, compute_stats, query_catalog
from app.catalog.normalizer import normalize_record, normalize_records
from app.catalog.search import run_search

__all__ = [
    "add_to_comparison",
    "build_comparison",
    "apply_filters",
    "apply_sort",
    "compute_stats",
    "query_catalog",
    "normalize_record",
    "normalize_records",
    "run_search",
]
