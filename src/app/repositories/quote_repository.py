"""Quote Repository Interface

Every lookup is scoped by company. A quote belonging to another company is
reported exactly like a missing one.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.quote import Quote


class QuoteRepository(ABC):
    """
    Repository interface for Quote persistence
    """

    @abstractmethod
    async def create(self, quote: Quote) -> Quote:
        """
        Create a new quote

        Args:
            quote: Quote entity with company_id and name set

        Returns:
            Created Quote with generated ID

        Raises:
            ValidationError: name is blank
        """
        pass

    @abstractmethod
    async def get(self, company_id: int, quote_id: int, for_update: bool = False) -> Quote:
        """
        Retrieve a quote within a company

        Args:
            company_id: Owning company scope
            quote_id: Quote ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Raises:
            NotFoundError: quote is absent or belongs to another company
        """
        pass

    @abstractmethod
    async def list_by_company(self, company_id: int) -> List[Quote]:
        """
        Retrieve the company's quotes, newest first
        """
        pass

    @abstractmethod
    async def update(self, quote: Quote) -> Quote:
        """
        Persist changes to a quote after re-validating it

        Raises:
            ValidationError: name is blank
        """
        pass

    @abstractmethod
    async def delete(self, company_id: int, quote_id: int) -> None:
        """
        Delete a quote with its line item dates and line items

        Raises:
            NotFoundError: quote is absent, already deleted or foreign
        """
        pass
