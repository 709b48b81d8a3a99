"""Field coercion and validation for hierarchy entities

Entities are SQLModel tables, which skip pydantic validation on construction,
so the store runs these checks on every write. Each helper returns the
normalized value or raises ValidationError naming the offending field.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from src.domain.errors import ValidationError

PRICE_QUANTUM = Decimal("0.01")
# unit_price column is NUMERIC(10, 2)
MAX_UNIT_PRICE = Decimal("99999999.99")
# quantity column is INTEGER (int4 on PostgreSQL)
MAX_QUANTITY = 2_147_483_647


def require_text(value: Any, field: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field.capitalize()} can't be blank", field=field)
    return value.strip()


def optional_text(value: Any, field: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field.capitalize()} must be text", field=field)
    return value


def require_date(value: Any, field: str = "date") -> date:
    if value is None or value == "":
        raise ValidationError("Date can't be blank", field=field)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise ValidationError(f"Date is not a valid date: {value!r}", field=field)


def _to_decimal(value: Any, field: str) -> Decimal:
    if value is None or value == "":
        raise ValidationError(f"{_label(field)} can't be blank", field=field)
    if isinstance(value, bool):
        raise ValidationError(f"{_label(field)} is not a number", field=field)
    try:
        number = Decimal(str(value).strip()) if not isinstance(value, Decimal) else value
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{_label(field)} is not a number", field=field)
    if not number.is_finite():
        raise ValidationError(f"{_label(field)} is not a number", field=field)
    return number


def require_quantity(value: Any, field: str = "quantity") -> int:
    number = _to_decimal(value, field)
    if number != number.to_integral_value():
        raise ValidationError("Quantity must be an integer", field=field)
    if abs(number) > MAX_QUANTITY:
        raise ValidationError(f"Quantity must be at most {MAX_QUANTITY}", field=field)
    return int(number)


def require_unit_price(value: Any, field: str = "unit_price") -> Decimal:
    number = _to_decimal(value, field)
    if abs(number) > MAX_UNIT_PRICE:
        raise ValidationError(f"Unit price must be at most {MAX_UNIT_PRICE}", field=field)
    return number.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


def _label(field: str) -> str:
    return field.replace("_", " ").capitalize()
