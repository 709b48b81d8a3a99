"""Line Item Domain Entity

A billable item within a line item date.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from src.domain.base import BaseModel, IdType
from src.domain.pricing import line_item_total


class LineItem(BaseModel, table=True):
    """
    Line Item - Billable item

    Domain Rules:
    - Belongs to exactly one line item date
    - name, quantity and unit_price are required
    - total_price = quantity * unit_price, derived and never stored
    """

    __tablename__ = "line_items"
    __table_args__ = (
        Index('ix_line_items_line_item_date_id', 'line_item_date_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique line item identifier (auto-increment)"
    )

    line_item_date_id: int = Field(
        sa_column=Column(IdType, ForeignKey("line_item_dates.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to LineItemDate"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Item name (e.g., 'Meeting room')"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Optional free-text description"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Number of units"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Price per unit (precision: 10,2)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Line item creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    @property
    def total_price(self) -> Decimal:
        return line_item_total(self)
