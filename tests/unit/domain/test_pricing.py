"""Unit tests for derived totals"""

from decimal import Decimal

from src.domain.line_item import LineItem
from src.domain.pricing import date_total, line_item_total, quote_total
from src.domain.validation import MAX_QUANTITY, MAX_UNIT_PRICE


def item(quantity, unit_price):
    return LineItem(
        line_item_date_id=1, name="Item", quantity=quantity, unit_price=Decimal(unit_price)
    )


class TestPricing:
    def test_line_item_total_is_quantity_times_unit_price(self):
        assert line_item_total(item(1, "1234.00")) == Decimal("1234.00")
        assert line_item_total(item(3, "19.99")) == Decimal("59.97")

    def test_total_price_property(self):
        assert item(2, "250.00").total_price == Decimal("500.00")

    def test_total_price_follows_current_state(self):
        line_item = item(1, "100.00")
        line_item.quantity = 4

        assert line_item.total_price == Decimal("400.00")

    def test_date_total_sums_items(self):
        assert date_total([item(1, "250.00"), item(2, "10.50")]) == Decimal("271.00")

    def test_empty_groups_total_zero(self):
        assert date_total([]) == Decimal("0.00")
        assert quote_total([]) == Decimal("0.00")
        assert quote_total([[], []]) == Decimal("0.00")

    def test_quote_total_sums_dates(self):
        groups = [[item(1, "250.00")], [item(2, "100.00"), item(1, "0.01")]]

        assert quote_total(groups) == Decimal("450.01")

    def test_no_binary_float_drift(self):
        # 0.1 + 0.2 style sums stay exact
        assert date_total([item(1, "0.10"), item(1, "0.20")]) == Decimal("0.30")

    def test_largest_item_totals_exactly(self):
        largest = item(MAX_QUANTITY, str(MAX_UNIT_PRICE))
        expected = Decimal(MAX_QUANTITY) * MAX_UNIT_PRICE

        assert line_item_total(largest) == expected
        assert date_total([largest, largest]) == expected * 2
        assert quote_total([[largest], [largest, largest]]) == expected * 3
