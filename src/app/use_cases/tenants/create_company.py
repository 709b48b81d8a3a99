"""CreateCompany Use Case"""

from libs.result import Error, Result, Return
from src.app.repositories.company_repository import CompanyRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.company import Company
from src.domain.errors import DomainError
from .dtos import CreateCompanyCommandDTO, CompanyResponseDTO


class CreateCompany:
    def __init__(self, uow: UnitOfWork, company_repo: CompanyRepository):
        self.uow = uow
        self.company_repo = company_repo

    async def execute(self, command: CreateCompanyCommandDTO) -> Result[CompanyResponseDTO]:
        try:
            company = await self.company_repo.create(Company(name=command.name))
            await self.uow.commit()
        except DomainError as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code=e.code,
                    message=e.message,
                    reason=type(e).__name__,
                    details={"field": e.field, "input": command.model_dump(mode="json")},
                )
            )
        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_COMPANY_FAILED",
                    message="Failed to create company",
                    reason=str(e),
                )
            )

        return Return.ok(CompanyResponseDTO.from_company(company))
