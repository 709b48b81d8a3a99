"""GetPreviousLineItemDate Use Case

Read-only: the nearest earlier line item date of the same quote.
"""

from typing import Optional
from libs.result import Error, Result, Return
from src.app.repositories.line_item_date_repository import LineItemDateRepository
from src.domain.errors import NotFoundError
from .dtos import LineItemDateResponseDTO


class GetPreviousLineItemDate:
    def __init__(self, line_item_date_repo: LineItemDateRepository):
        self.line_item_date_repo = line_item_date_repo

    async def execute(
        self, company_id: int, quote_id: int, line_item_date_id: int
    ) -> Result[Optional[LineItemDateResponseDTO]]:
        """
        Returns:
            Result with the previous date, or with None when this is the earliest

        Errors:
            LINE_ITEM_DATE_NOT_FOUND: absent, under another quote, or foreign
        """
        try:
            line_item_date = await self.line_item_date_repo.get(
                company_id, quote_id, line_item_date_id
            )
        except NotFoundError as e:
            return Return.err(Error(code=e.code, message=e.message, reason=type(e).__name__))

        previous = await self.line_item_date_repo.get_previous(line_item_date)
        if previous is None:
            return Return.ok(None)
        return Return.ok(LineItemDateResponseDTO.from_line_item_date(previous))
