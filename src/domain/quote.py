"""Quote Domain Entity

A named price quote owned by a company.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, String
from src.domain.base import BaseModel, IdType


class Quote(BaseModel, table=True):
    """
    Quote - Root of a quote hierarchy

    Domain Rules:
    - Belongs to exactly one company
    - name is required and non-blank
    - Listed newest first (id descending; ids are never reused)
    - Destroying a quote destroys its line item dates and their line items
    """

    __tablename__ = "quotes"
    __table_args__ = (
        Index('ix_quotes_company_id', 'company_id'),
        {"sqlite_autoincrement": True},
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique quote identifier (auto-increment)"
    )

    company_id: int = Field(
        sa_column=Column(IdType, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Company"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Quote name"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Quote creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
