"""Pricing aggregation

Totals are computed from current line item state and never stored. All
arithmetic is Decimal, quantized to cents, under a context wide enough that
no total of in-range items is ever rounded or rejected.
"""

from decimal import Context, Decimal, ROUND_HALF_UP, localcontext
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.line_item import LineItem

ZERO = Decimal("0.00")
CENT = Decimal("0.01")

PRICING_CONTEXT = Context(prec=60, rounding=ROUND_HALF_UP)


def line_item_total(item: "LineItem") -> Decimal:
    """quantity * unit_price, exact to two decimal places"""
    unit_price = item.unit_price if isinstance(item.unit_price, Decimal) else Decimal(str(item.unit_price))
    with localcontext(PRICING_CONTEXT):
        return (Decimal(item.quantity) * unit_price).quantize(CENT)


def date_total(line_items: Iterable["LineItem"]) -> Decimal:
    """Sum of the line item totals of one line item date"""
    with localcontext(PRICING_CONTEXT):
        return sum((line_item_total(item) for item in line_items), ZERO)


def quote_total(date_groups: Iterable[Iterable["LineItem"]]) -> Decimal:
    """Sum of date totals, one group of line items per line item date"""
    with localcontext(PRICING_CONTEXT):
        return sum((date_total(group) for group in date_groups), ZERO)
