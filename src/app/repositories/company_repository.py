"""Company Repository Interface

Defines the contract for company (tenant) persistence operations.
"""

from abc import ABC, abstractmethod
from src.domain.company import Company


class CompanyRepository(ABC):
    """
    Repository interface for Company persistence
    """

    @abstractmethod
    async def create(self, company: Company) -> Company:
        """
        Create a new company

        Raises:
            ValidationError: name is blank
        """
        pass

    @abstractmethod
    async def get(self, company_id: int) -> Company:
        """
        Retrieve company by ID

        Raises:
            NotFoundError: company does not exist
        """
        pass

    @abstractmethod
    async def delete(self, company_id: int) -> None:
        """
        Delete a company with its users, quotes, line item dates and line items

        Raises:
            NotFoundError: company does not exist (or was already deleted)
        """
        pass
