"""GetQuote Use Case

Read-only: the full quote tree with per-item, per-date and quote totals.
Takes no locks, so it may observe state before or after a concurrent write
but only committed state.
"""

from libs.result import Error, Result, Return
from src.app.repositories.line_item_date_repository import LineItemDateRepository
from src.app.repositories.line_item_repository import LineItemRepository
from src.app.repositories.quote_repository import QuoteRepository
from src.domain.errors import NotFoundError
from src.domain.pricing import date_total, quote_total
from .dtos import LineItemDateDetailDTO, LineItemResponseDTO, QuoteDetailDTO


class GetQuote:
    """
    Get Quote Use Case

    Errors:
        QUOTE_NOT_FOUND: quote is absent or belongs to another company
    """

    def __init__(
        self,
        quote_repo: QuoteRepository,
        line_item_date_repo: LineItemDateRepository,
        line_item_repo: LineItemRepository,
    ):
        self.quote_repo = quote_repo
        self.line_item_date_repo = line_item_date_repo
        self.line_item_repo = line_item_repo

    async def execute(self, company_id: int, quote_id: int) -> Result[QuoteDetailDTO]:
        try:
            quote = await self.quote_repo.get(company_id, quote_id)
        except NotFoundError as e:
            return Return.err(Error(code=e.code, message=e.message, reason=type(e).__name__))

        line_item_dates = await self.line_item_date_repo.list_by_quote(quote.id)
        line_items_by_date = await self.line_item_repo.list_by_quote(quote.id)

        date_groups = [line_items_by_date.get(d.id, []) for d in line_item_dates]
        return Return.ok(
            QuoteDetailDTO(
                id=quote.id,
                company_id=quote.company_id,
                name=quote.name,
                created_at=quote.created_at,
                updated_at=quote.updated_at,
                line_item_dates=[
                    LineItemDateDetailDTO(
                        id=line_item_date.id,
                        date=line_item_date.date,
                        line_items=[LineItemResponseDTO.from_line_item(item) for item in items],
                        total=date_total(items),
                    )
                    for line_item_date, items in zip(line_item_dates, date_groups)
                ],
                total=quote_total(date_groups),
            )
        )
