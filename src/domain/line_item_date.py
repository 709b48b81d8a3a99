"""Line Item Date Domain Entity

Groups the line items of a quote that fall on one calendar date.
"""

from datetime import datetime, date as date_type
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Date, ForeignKey
from src.domain.base import BaseModel, IdType


class LineItemDate(BaseModel, table=True):
    """
    Line Item Date - Dated group of line items

    Domain Rules:
    - Belongs to exactly one quote
    - (quote_id, date) is unique
    - Ordered by date ascending within a quote
    - Destroying a date destroys its line items
    """

    __tablename__ = "line_item_dates"
    __table_args__ = (
        Index('ix_line_item_dates_date_quote_id', 'date', 'quote_id', unique=True),
        Index('ix_line_item_dates_date', 'date'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique line item date identifier (auto-increment)"
    )

    quote_id: int = Field(
        sa_column=Column(IdType, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Quote"
    )

    date: date_type = Field(
        sa_column=Column(Date, nullable=False),
        description="Calendar date of the group"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
