"""Data Transfer Objects for Tenant Use Cases"""

from datetime import datetime
from typing import Any
from pydantic import BaseModel, Field

from src.domain.company import Company
from src.domain.user import User, display_name


class CreateCompanyCommandDTO(BaseModel):
    name: Any = Field(default=None, description="Company name (required, non-blank)")


class CompanyResponseDTO(BaseModel):
    id: int
    name: str
    created_at: datetime

    @classmethod
    def from_company(cls, company: Company) -> "CompanyResponseDTO":
        return cls(id=company.id, name=company.name, created_at=company.created_at)


class CreateUserCommandDTO(BaseModel):
    company_id: int
    email: Any = Field(default=None, description="Login identifier")


class ActorDTO(BaseModel):
    """
    Authenticated actor

    company_id scopes every read and write the actor makes.
    """

    user_id: int = Field(..., description="User ID")
    company_id: int = Field(..., description="Company the actor belongs to")
    email: str = Field(..., description="Login identifier")

    @property
    def name(self) -> str:
        return display_name(self.email)

    @classmethod
    def from_user(cls, user: User) -> "ActorDTO":
        return cls(user_id=user.id, company_id=user.company_id, email=user.email)

    class Config:
        json_schema_extra = {
            "example": {"user_id": 1, "company_id": 1, "email": "accountant@kpmg.com"}
        }


class ActorResponseDTO(BaseModel):
    user_id: int
    company_id: int
    email: str
    name: str = Field(..., description="Display name derived from the email")

    @classmethod
    def from_actor(cls, actor: ActorDTO) -> "ActorResponseDTO":
        return cls(
            user_id=actor.user_id,
            company_id=actor.company_id,
            email=actor.email,
            name=actor.name,
        )
