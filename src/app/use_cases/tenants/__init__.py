"""Tenant (company and user) use cases"""
from .create_company import CreateCompany
from .destroy_company import DestroyCompany
from .create_user import CreateUser
from .get_actor import GetActor
from .dtos import (
    CreateCompanyCommandDTO,
    CompanyResponseDTO,
    CreateUserCommandDTO,
    ActorDTO,
    ActorResponseDTO,
)

__all__ = [
    "CreateCompany",
    "DestroyCompany",
    "CreateUser",
    "GetActor",
    "CreateCompanyCommandDTO",
    "CompanyResponseDTO",
    "CreateUserCommandDTO",
    "ActorDTO",
    "ActorResponseDTO",
]
