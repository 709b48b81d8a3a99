"""ListQuotes Use Case

Read-only: the company's quotes, newest first.
"""

from libs.result import Result, Return
from src.app.repositories.quote_repository import QuoteRepository
from .dtos import QuoteListResponseDTO, QuoteResponseDTO


class ListQuotes:
    def __init__(self, quote_repo: QuoteRepository):
        self.quote_repo = quote_repo

    async def execute(self, company_id: int) -> Result[QuoteListResponseDTO]:
        quotes = await self.quote_repo.list_by_company(company_id)
        return Return.ok(
            QuoteListResponseDTO(
                quotes=[QuoteResponseDTO.from_quote(quote) for quote in quotes],
                total_count=len(quotes),
            )
        )
