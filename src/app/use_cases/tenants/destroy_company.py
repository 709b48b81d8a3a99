"""DestroyCompany Use Case

Removes a tenant: its users, quotes, line item dates and line items, in one
unit of work.
"""

import logging
from libs.result import Error, Result, Return
from src.app.repositories.company_repository import CompanyRepository
from src.app.services.tenant_lock import TenantLock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import NotFoundError

logger = logging.getLogger(__name__)


class DestroyCompany:
    """
    Use Case: Destroy a company and everything it owns

    Holds the company write lock so no quote mutation of the same company
    interleaves with the cascade.
    """

    def __init__(self, uow: UnitOfWork, company_repo: CompanyRepository, tenant_lock: TenantLock):
        self.uow = uow
        self.company_repo = company_repo
        self.tenant_lock = tenant_lock

    async def execute(self, company_id: int) -> Result[int]:
        """
        Returns:
            Result with the destroyed company ID

        Errors:
            COMPANY_NOT_FOUND: company is absent or already destroyed
        """
        async with self.tenant_lock.hold(company_id):
            try:
                await self.company_repo.delete(company_id)
                await self.uow.commit()
            except NotFoundError as e:
                await self.uow.rollback()
                return Return.err(Error(code=e.code, message=e.message, reason=type(e).__name__))
            except Exception as e:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="DESTROY_COMPANY_FAILED",
                        message="Failed to destroy company",
                        reason=str(e),
                    )
                )

        logger.info(f"Company {company_id} destroyed")
        return Return.ok(company_id)
