"""User Domain Entity

Staff member of a company. Credentials live with the authentication
provider; only the login email and company affiliation are kept here.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, String
from src.domain.base import BaseModel, IdType


def display_name(email: str) -> str:
    """Part of the login email before "@", capitalized"""
    return email.split("@")[0].capitalize()


class User(BaseModel, table=True):
    """
    User - Staff member scoped to one company

    Domain Rules:
    - Belongs to exactly one company
    - email is unique
    - Display name is derived from email, never stored
    """

    __tablename__ = "users"
    __table_args__ = (
        Index('ix_users_company_id', 'company_id'),
        Index('ix_users_email', 'email', unique=True),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique user identifier (auto-increment)"
    )

    company_id: int = Field(
        sa_column=Column(IdType, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Company"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Login identifier"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="User creation timestamp"
    )

    @property
    def name(self) -> str:
        return display_name(self.email)
