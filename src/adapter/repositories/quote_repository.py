"""SQLAlchemy Quote Repository Implementation

Implements quote persistence using SQLAlchemy async session.
"""

from datetime import datetime
from typing import List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.quote_repository import QuoteRepository
from src.domain.errors import NotFoundError
from src.domain.line_item import LineItem
from src.domain.line_item_date import LineItemDate
from src.domain.quote import Quote
from src.domain.validation import require_text


class SqlAlchemyQuoteRepository(QuoteRepository):
    """
    SQLAlchemy implementation of QuoteRepository

    Features:
    - Company-scoped lookups (foreign quotes look missing)
    - Optional pessimistic locking via SELECT FOR UPDATE
    - Explicit cascading delete of dates and line items
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, quote: Quote) -> Quote:
        quote.name = require_text(quote.name, "name")
        self.session.add(quote)
        await self.session.flush()
        await self.session.refresh(quote)
        return quote

    async def get(self, company_id: int, quote_id: int, for_update: bool = False) -> Quote:
        """
        Retrieve quote by ID within a company

        Args:
            company_id: Owning company scope
            quote_id: Quote ID
            for_update: If True, locks the row (no-op on SQLite)

        Returns:
            Quote

        Raises:
            NotFoundError: quote is absent or belongs to another company
        """
        statement = (
            select(Quote)
            .where(Quote.id == quote_id)
            .where(Quote.company_id == company_id)
        )

        if for_update:
            statement = statement.with_for_update()

        result = await self.session.execute(statement)
        quote = result.scalar_one_or_none()
        if quote is None:
            raise NotFoundError("Quote", quote_id)
        return quote

    async def list_by_company(self, company_id: int) -> List[Quote]:
        statement = (
            select(Quote)
            .where(Quote.company_id == company_id)
            .order_by(Quote.id.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, quote: Quote) -> Quote:
        quote.name = require_text(quote.name, "name")
        quote.updated_at = datetime.utcnow()
        self.session.add(quote)
        await self.session.flush()
        await self.session.refresh(quote)
        return quote

    async def delete(self, company_id: int, quote_id: int) -> None:
        """
        Delete a quote and everything under it, leaves first

        Raises:
            NotFoundError: quote is absent, already deleted or foreign
        """
        await self.get(company_id, quote_id, for_update=True)

        date_ids = select(LineItemDate.id).where(LineItemDate.quote_id == quote_id)
        await self.session.execute(
            delete(LineItem)
            .where(LineItem.line_item_date_id.in_(date_ids))
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(
            delete(LineItemDate)
            .where(LineItemDate.quote_id == quote_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(
            delete(Quote)
            .where(Quote.id == quote_id)
            .where(Quote.company_id == company_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError("Quote", quote_id)
