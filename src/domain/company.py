"""Company Domain Entity

Tenant root. Every user and quote belongs to exactly one company.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, IdType


class Company(BaseModel, table=True):
    """
    Company - Tenant root

    Domain Rules:
    - name is required and non-blank
    - Destroying a company destroys its users and quotes (and their subtrees)
    """

    __tablename__ = "companies"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique company identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Company name"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Company creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
