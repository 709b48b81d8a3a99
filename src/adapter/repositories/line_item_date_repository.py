"""SQLAlchemy Line Item Date Repository Implementation

Uniqueness of (quote_id, date) is checked before writing and enforced again
by the unique index when the row is flushed; an integrity violation at that
point is reported as UniquenessError as well.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.line_item_date_repository import LineItemDateRepository
from src.adapter.services.unit_of_work import is_duplicate_date
from src.domain.errors import NotFoundError, UniquenessError
from src.domain.line_item import LineItem
from src.domain.line_item_date import LineItemDate
from src.domain.quote import Quote
from src.domain.validation import require_date


class SqlAlchemyLineItemDateRepository(LineItemDateRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, line_item_date: LineItemDate) -> LineItemDate:
        line_item_date.date = require_date(line_item_date.date)
        await self._ensure_unique(line_item_date)
        self.session.add(line_item_date)
        await self._flush(line_item_date)
        return line_item_date

    async def get(self, company_id: int, quote_id: int, line_item_date_id: int) -> LineItemDate:
        statement = (
            select(LineItemDate)
            .join(Quote, Quote.id == LineItemDate.quote_id)
            .where(LineItemDate.id == line_item_date_id)
            .where(LineItemDate.quote_id == quote_id)
            .where(Quote.company_id == company_id)
        )
        result = await self.session.execute(statement)
        line_item_date = result.scalar_one_or_none()
        if line_item_date is None:
            raise NotFoundError("LineItemDate", line_item_date_id)
        return line_item_date

    async def list_by_quote(self, quote_id: int) -> List[LineItemDate]:
        statement = (
            select(LineItemDate)
            .where(LineItemDate.quote_id == quote_id)
            .order_by(LineItemDate.date.asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_previous(self, line_item_date: LineItemDate) -> Optional[LineItemDate]:
        statement = (
            select(LineItemDate)
            .where(LineItemDate.quote_id == line_item_date.quote_id)
            .where(LineItemDate.date < line_item_date.date)
            .order_by(LineItemDate.date.desc())
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, line_item_date: LineItemDate) -> LineItemDate:
        line_item_date.date = require_date(line_item_date.date)
        await self._ensure_unique(line_item_date)
        line_item_date.updated_at = datetime.utcnow()
        self.session.add(line_item_date)
        await self._flush(line_item_date)
        return line_item_date

    async def delete(self, company_id: int, quote_id: int, line_item_date_id: int) -> None:
        await self.get(company_id, quote_id, line_item_date_id)

        await self.session.execute(
            delete(LineItem)
            .where(LineItem.line_item_date_id == line_item_date_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(
            delete(LineItemDate)
            .where(LineItemDate.id == line_item_date_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError("LineItemDate", line_item_date_id)

    async def _ensure_unique(self, line_item_date: LineItemDate) -> None:
        statement = (
            select(func.count())
            .select_from(LineItemDate)
            .where(LineItemDate.quote_id == line_item_date.quote_id)
            .where(LineItemDate.date == line_item_date.date)
        )
        if line_item_date.id is not None:
            statement = statement.where(LineItemDate.id != line_item_date.id)

        result = await self.session.execute(statement)
        if result.scalar_one() > 0:
            raise UniquenessError(_taken_message(line_item_date), field="date")

    async def _flush(self, line_item_date: LineItemDate) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            if not is_duplicate_date(e):
                raise
            raise UniquenessError(_taken_message(line_item_date), field="date") from e
        await self.session.refresh(line_item_date)


def _taken_message(line_item_date: LineItemDate) -> str:
    return f"Date {line_item_date.date.isoformat()} has already been taken for this quote"
