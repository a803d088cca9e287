"""Side-by-side product comparison."""

from typing import Callable, List, Sequence, Tuple

from app.schemas.catalog import CatalogProduct, ComparisonRow, ComparisonTable

MAX_COMPARED = 3
MISSING_VALUE = "N/A"

COMPARISON_FIELDS: List[Tuple[str, Callable[[CatalogProduct], str]]] = [
    ("Category", lambda product: product.category.value),
    ("Subcategory", lambda product: product.subcategory),
    ("Difficulty Level", lambda product: product.difficulty_level.value),
    ("Maturity Time", lambda product: product.maturity_time),
    ("Expected Yield", lambda product: product.yield_expectation),
    ("Seasonality", lambda product: ", ".join(season.value for season in product.seasonality)),
    ("Availability", lambda product: "Available" if product.availability else "Out of Stock"),
]


def add_to_comparison(
    selection: Sequence[CatalogProduct], product: CatalogProduct
) -> List[CatalogProduct]:
    """Append ``product`` unless it is already selected or the selection is full."""
    selected = list(selection)
    if len(selected) >= MAX_COMPARED or any(item.id == product.id for item in selected):
        return selected
    selected.append(product)
    return selected


def remove_from_comparison(
    selection: Sequence[CatalogProduct], product_id: str
) -> List[CatalogProduct]:
    return [item for item in selection if item.id != product_id]


def build_comparison(products: Sequence[CatalogProduct]) -> ComparisonTable:
    """Comparison table for at most three products.

    Specification rows follow the first product's specifications; other
    products without a matching specification show ``N/A``.
    """
    selected: List[CatalogProduct] = []
    for product in products:
        selected = add_to_comparison(selected, product)

    rows = [
        ComparisonRow(
            label=label,
            values=[get_value(product) or MISSING_VALUE for product in selected],
        )
        for label, get_value in COMPARISON_FIELDS
    ] if selected else []

    specification_rows = []
    if selected:
        for spec in selected[0].specifications:
            values = []
            for product in selected:
                match = next((s for s in product.specifications if s.name == spec.name), None)
                values.append(match.value if match and match.value else MISSING_VALUE)
            specification_rows.append(ComparisonRow(label=spec.name, values=values))

    return ComparisonTable(
        product_ids=[product.id for product in selected],
        product_names=[product.name for product in selected],
        rows=rows,
        specification_rows=specification_rows,
    )
