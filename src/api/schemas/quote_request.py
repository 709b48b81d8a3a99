"""Request schemas for the Quote API

Fields are deliberately loose: malformed values are passed through to the
use cases, which reject them with a structured error and echo the input.
"""

from typing import Any
from pydantic import BaseModel, Field


class QuoteRequestSchema(BaseModel):
    """Body of POST /quotes and PATCH /quotes/{quote_id}"""

    name: Any = Field(default=None, description="Quote name (required, non-blank)")

    class Config:
        json_schema_extra = {"example": {"name": "First quote"}}


class LineItemDateRequestSchema(BaseModel):
    """Body of POST/PATCH on line item dates"""

    date: Any = Field(default=None, description="ISO-8601 calendar date")

    class Config:
        json_schema_extra = {"example": {"date": "2024-01-01"}}


class LineItemRequestSchema(BaseModel):
    """Body of POST/PATCH on line items"""

    name: Any = Field(default=None, description="Item name (required)")
    description: Any = Field(default=None, description="Optional description")
    quantity: Any = Field(default=None, description="Integer quantity (required)")
    unit_price: Any = Field(default=None, description="Unit price, two decimals (required)")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Meeting room",
                "description": "Room with a projector",
                "quantity": 1,
                "unit_price": "250.00"
            }
        }
