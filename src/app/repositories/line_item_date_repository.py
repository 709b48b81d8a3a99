"""Line Item Date Repository Interface

Lookups are scoped by company and quote. Writes enforce the per-quote
uniqueness of dates.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.line_item_date import LineItemDate


class LineItemDateRepository(ABC):
    """
    Repository interface for LineItemDate persistence
    """

    @abstractmethod
    async def create(self, line_item_date: LineItemDate) -> LineItemDate:
        """
        Create a new line item date

        Raises:
            ValidationError: date is missing or malformed
            UniquenessError: the quote already has this date
        """
        pass

    @abstractmethod
    async def get(self, company_id: int, quote_id: int, line_item_date_id: int) -> LineItemDate:
        """
        Retrieve a line item date within a company's quote

        Raises:
            NotFoundError: absent, under another quote, or foreign
        """
        pass

    @abstractmethod
    async def list_by_quote(self, quote_id: int) -> List[LineItemDate]:
        """
        Retrieve a quote's line item dates ordered by date ascending
        """
        pass

    @abstractmethod
    async def get_previous(self, line_item_date: LineItemDate) -> Optional[LineItemDate]:
        """
        Nearest earlier line item date of the same quote

        Returns:
            LineItemDate if one exists, None for the earliest date
        """
        pass

    @abstractmethod
    async def update(self, line_item_date: LineItemDate) -> LineItemDate:
        """
        Persist changes after re-validating the full entity

        Raises:
            ValidationError: date is missing or malformed
            UniquenessError: a sibling already has this date
        """
        pass

    @abstractmethod
    async def delete(self, company_id: int, quote_id: int, line_item_date_id: int) -> None:
        """
        Delete a line item date with its line items

        Raises:
            NotFoundError: absent, already deleted or foreign
        """
        pass
