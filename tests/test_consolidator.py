"""Tests for cross-outlet consolidation."""

from inventory_engine.classifier import classify
from inventory_engine.consolidator import consolidate
from inventory_engine.models import Classification
from tests.conftest import stock_row, sales_row, CENTRO, NORTE, ORIENTE


class TestConsolidate:
    """Tests for consolidate."""

    def test_single_outlet_is_identity_on_totals(self, config):
        rows = [
            stock_row("A1", 100), sales_row("A1", 120),
            stock_row("B2", 500), sales_row("B2", 60),
            stock_row("C3", 10),
        ]
        items = classify(rows, config)

        consolidated = consolidate(items, config)

        by_code = {c.product_code: c for c in consolidated}
        for item in items:
            assert by_code[item.product_code].current_stock == item.current_stock
            assert by_code[item.product_code].total_sales == item.total_sales
            assert by_code[item.product_code].classification == item.classification

    def test_merges_outlets_and_sums_totals(self, config):
        rows = [
            stock_row("A1", 30, name="Acetaminofen 500", brand="Genven", outlet=CENTRO),
            sales_row("A1", 60, outlet=CENTRO),
            stock_row("A1", 20, name="ACETAMINOFEN 500MG", brand="Calox", outlet=NORTE),
            sales_row("A1", 60, outlet=NORTE),
        ]

        consolidated = consolidate(classify(rows, config), config)

        assert len(consolidated) == 1
        item = consolidated[0]
        assert item.product_names == ("Acetaminofen 500", "ACETAMINOFEN 500MG")
        assert item.display_name == "Acetaminofen 500, ACETAMINOFEN 500MG"
        assert item.brands == ("Genven", "Calox")
        assert item.outlet_ids == (CENTRO, NORTE)
        assert item.stock_by_outlet == {CENTRO: 30, NORTE: 20}
        assert item.current_stock == 50
        assert item.total_sales == 120
        assert item.daily_velocity == 2.0

    def test_classification_is_rederived_from_totals(self, config):
        """Each outlet alone is Unsold or Falla; together the product is OK.

        Centro: stock 100, no sales -> Unsold
        Norte: stock 0, 120 sold -> Falla
        Total: stock 100, 120 sold -> 50 days of supply -> OK
        """
        rows = [
            stock_row("A1", 100, outlet=CENTRO),
            stock_row("A1", 0, outlet=NORTE),
            sales_row("A1", 120, outlet=NORTE),
        ]
        items = classify(rows, config)
        assert {i.classification for i in items} == {Classification.UNSOLD, Classification.SHORTAGE}

        item = consolidate(items, config)[0]

        assert item.classification == Classification.BALANCED
        assert item.excess_units == 0
        assert item.suggested_reorder[60] == 20

    def test_same_outlet_listed_twice_accumulates_stock(self, config):
        rows = [stock_row("A1", 4), stock_row("A1", 6)]

        item = consolidate(classify(rows, config), config)[0]

        assert item.outlet_ids == (CENTRO,)
        assert item.stock_by_outlet == {CENTRO: 10}
        assert item.current_stock == 10

    def test_preserves_first_seen_order(self, config):
        rows = [
            stock_row("Z9", 1, outlet=CENTRO),
            stock_row("A1", 1, outlet=CENTRO),
            stock_row("M5", 1, outlet=ORIENTE),
            stock_row("A1", 1, outlet=ORIENTE),
        ]

        consolidated = consolidate(classify(rows, config), config)

        assert [c.product_code for c in consolidated] == ["Z9", "A1", "M5"]

    def test_is_idempotent(self, config):
        rows = [
            stock_row("A1", 100, outlet=CENTRO), sales_row("A1", 120, outlet=CENTRO),
            stock_row("A1", 5, outlet=NORTE), stock_row("B2", 7, outlet=NORTE),
        ]
        items = classify(rows, config)

        assert consolidate(items, config) == consolidate(items, config)

    def test_empty_input(self, config):
        assert consolidate([], config) == []
