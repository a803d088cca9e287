"""Tests for product comparison."""

from app.catalog.compare import MAX_COMPARED, add_to_comparison, build_comparison, remove_from_comparison


class TestSelection:
    """Test comparison selection rules."""

    def test_max_three_distinct(self, catalog_products):
        selection = []
        for product in catalog_products + catalog_products:
            selection = add_to_comparison(selection, product)
        assert [p.id for p in selection] == [p.id for p in catalog_products]
        assert len(selection) <= MAX_COMPARED

    def test_full_selection_ignores_more(self, catalog_products):
        selection = list(catalog_products)
        extra = catalog_products[0].model_copy(update={"id": "another"})
        assert add_to_comparison(selection, extra) == selection

    def test_remove(self, catalog_products):
        remaining = remove_from_comparison(catalog_products, catalog_products[1].id)
        assert [p.id for p in remaining] == [catalog_products[0].id, catalog_products[2].id]


class TestComparisonTable:
    """Test the comparison table."""

    def test_fixed_rows(self, catalog_products):
        table = build_comparison(catalog_products)
        labels = [row.label for row in table.rows]
        assert labels == [
            "Category",
            "Subcategory",
            "Difficulty Level",
            "Maturity Time",
            "Expected Yield",
            "Seasonality",
            "Availability",
        ]
        rows = {row.label: row.values for row in table.rows}
        assert rows["Category"] == ["Maize", "Vegetable", "Cotton"]
        assert rows["Seasonality"] == ["Monsoon, Winter", "Summer", "Monsoon"]
        assert rows["Availability"] == ["Available", "Available", "Out of Stock"]

    def test_specification_rows_follow_first_product(self, catalog_products):
        table = build_comparison(catalog_products)
        specs = {row.label: row.values for row in table.specification_rows}
        assert list(specs) == ["Seed Color", "Plant Height", "Maturity Time"]
        assert specs["Seed Color"] == ["Orange-Yellow", "N/A", "N/A"]

    def test_empty(self):
        table = build_comparison([])
        assert table.product_ids == []
        assert table.rows == []
        assert table.specification_rows == []
