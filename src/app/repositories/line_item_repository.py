"""Line Item Repository Interface"""

from abc import ABC, abstractmethod
from typing import Dict, List
from src.domain.line_item import LineItem


class LineItemRepository(ABC):
    """
    Repository interface for LineItem persistence
    """

    @abstractmethod
    async def create(self, line_item: LineItem) -> LineItem:
        """
        Create a new line item

        Raises:
            ValidationError: name blank, quantity or unit price missing/non-numeric
        """
        pass

    @abstractmethod
    async def get(
        self, company_id: int, quote_id: int, line_item_date_id: int, line_item_id: int
    ) -> LineItem:
        """
        Retrieve a line item along its full parent chain

        Raises:
            NotFoundError: absent, under another parent, or foreign
        """
        pass

    @abstractmethod
    async def list_by_quote(self, quote_id: int) -> Dict[int, List[LineItem]]:
        """
        Retrieve all line items of a quote grouped by line_item_date_id
        """
        pass

    @abstractmethod
    async def update(self, line_item: LineItem) -> LineItem:
        """
        Persist changes after re-validating the full entity

        Raises:
            ValidationError: see create()
        """
        pass

    @abstractmethod
    async def delete(
        self, company_id: int, quote_id: int, line_item_date_id: int, line_item_id: int
    ) -> None:
        """
        Raises:
            NotFoundError: absent, already deleted or foreign
        """
        pass
