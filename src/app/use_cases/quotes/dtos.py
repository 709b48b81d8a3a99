"""Data Transfer Objects for Quote Use Cases

Command DTOs accept raw client input (fields typed ``Any``) so that
malformed values reach the hierarchy store, which validates them and lets
the use case hand the original input back with the error.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional
from pydantic import BaseModel, Field

from src.domain.line_item import LineItem
from src.domain.line_item_date import LineItemDate
from src.domain.quote import Quote


class PatchCommand(BaseModel):
    """Update command whose patch is the set of editable fields explicitly provided"""

    editable_fields: ClassVar[FrozenSet[str]] = frozenset()

    def patch(self) -> Dict[str, Any]:
        return self.model_dump(include=set(self.editable_fields), exclude_unset=True)


# --- Quotes ---------------------------------------------------------------


class CreateQuoteCommandDTO(BaseModel):
    company_id: int = Field(..., description="Owning company (from the authenticated actor)")
    name: Any = Field(default=None, description="Quote name (required, non-blank)")

    class Config:
        json_schema_extra = {"example": {"company_id": 1, "name": "First quote"}}


class UpdateQuoteCommandDTO(PatchCommand):
    editable_fields: ClassVar[FrozenSet[str]] = frozenset({"name"})

    company_id: int
    quote_id: int
    name: Any = None


class DestroyQuoteCommandDTO(BaseModel):
    company_id: int
    quote_id: int


class QuoteResponseDTO(BaseModel):
    """
    Response DTO for quote operations

    Returned by CreateQuote, UpdateQuote and ListQuotes.
    """

    id: int = Field(..., description="Quote ID")
    company_id: int = Field(..., description="Owning company")
    name: str = Field(..., description="Quote name")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponseDTO":
        return cls(
            id=quote.id,
            company_id=quote.company_id,
            name=quote.name,
            created_at=quote.created_at,
            updated_at=quote.updated_at,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "company_id": 1,
                "name": "First quote",
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }


class QuoteListResponseDTO(BaseModel):
    """Quotes of a company, newest first"""

    quotes: List[QuoteResponseDTO]
    total_count: int


class DestroyedResponseDTO(BaseModel):
    id: int
    destroyed: bool = True


# --- Line item dates ------------------------------------------------------


class CreateLineItemDateCommandDTO(BaseModel):
    company_id: int
    quote_id: int
    date: Any = Field(default=None, description="Calendar date (date or ISO-8601 string)")


class UpdateLineItemDateCommandDTO(PatchCommand):
    editable_fields: ClassVar[FrozenSet[str]] = frozenset({"date"})

    company_id: int
    quote_id: int
    line_item_date_id: int
    date: Any = None


class DestroyLineItemDateCommandDTO(BaseModel):
    company_id: int
    quote_id: int
    line_item_date_id: int


class LineItemDateResponseDTO(BaseModel):
    id: int
    quote_id: int
    date: date
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_line_item_date(cls, line_item_date: LineItemDate) -> "LineItemDateResponseDTO":
        return cls(
            id=line_item_date.id,
            quote_id=line_item_date.quote_id,
            date=line_item_date.date,
            created_at=line_item_date.created_at,
            updated_at=line_item_date.updated_at,
        )


# --- Line items -----------------------------------------------------------


class CreateLineItemCommandDTO(BaseModel):
    company_id: int
    quote_id: int
    line_item_date_id: int
    name: Any = None
    description: Any = None
    quantity: Any = None
    unit_price: Any = None

    class Config:
        json_schema_extra = {
            "example": {
                "company_id": 1,
                "quote_id": 1,
                "line_item_date_id": 1,
                "name": "Meeting room",
                "description": "Room with a projector",
                "quantity": 1,
                "unit_price": "250.00"
            }
        }


class UpdateLineItemCommandDTO(PatchCommand):
    editable_fields: ClassVar[FrozenSet[str]] = frozenset(
        {"name", "description", "quantity", "unit_price"}
    )

    company_id: int
    quote_id: int
    line_item_date_id: int
    line_item_id: int
    name: Any = None
    description: Any = None
    quantity: Any = None
    unit_price: Any = None


class DestroyLineItemCommandDTO(BaseModel):
    company_id: int
    quote_id: int
    line_item_date_id: int
    line_item_id: int


class LineItemResponseDTO(BaseModel):
    id: int
    line_item_date_id: int
    name: str
    description: Optional[str] = None
    quantity: int
    unit_price: Decimal
    total_price: Decimal = Field(..., description="quantity * unit_price")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_line_item(cls, line_item: LineItem) -> "LineItemResponseDTO":
        return cls(
            id=line_item.id,
            line_item_date_id=line_item.line_item_date_id,
            name=line_item.name,
            description=line_item.description,
            quantity=line_item.quantity,
            unit_price=line_item.unit_price,
            total_price=line_item.total_price,
            created_at=line_item.created_at,
            updated_at=line_item.updated_at,
        )


# --- Quote detail ---------------------------------------------------------


class LineItemDateDetailDTO(BaseModel):
    id: int
    date: date
    line_items: List[LineItemResponseDTO]
    total: Decimal = Field(..., description="Sum of line item totals")


class QuoteDetailDTO(BaseModel):
    """
    Full quote tree with totals

    Returned by GetQuote.
    """

    id: int
    company_id: int
    name: str
    created_at: datetime
    updated_at: datetime
    line_item_dates: List[LineItemDateDetailDTO]
    total: Decimal = Field(..., description="Sum of line item date totals")
