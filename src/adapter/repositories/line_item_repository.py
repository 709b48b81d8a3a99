"""SQLAlchemy Line Item Repository Implementation"""

from collections import defaultdict
from datetime import datetime
from typing import Dict, List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.line_item_repository import LineItemRepository
from src.domain.errors import NotFoundError
from src.domain.line_item import LineItem
from src.domain.line_item_date import LineItemDate
from src.domain.quote import Quote
from src.domain.validation import (
    optional_text,
    require_quantity,
    require_text,
    require_unit_price,
)


def _validate(line_item: LineItem) -> None:
    line_item.name = require_text(line_item.name, "name")
    line_item.description = optional_text(line_item.description, "description")
    line_item.quantity = require_quantity(line_item.quantity)
    line_item.unit_price = require_unit_price(line_item.unit_price)


class SqlAlchemyLineItemRepository(LineItemRepository):
    """
    SQLAlchemy implementation of LineItemRepository

    Lookups walk the whole parent chain (date -> quote -> company).
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, line_item: LineItem) -> LineItem:
        _validate(line_item)
        self.session.add(line_item)
        await self.session.flush()
        await self.session.refresh(line_item)
        return line_item

    async def get(
        self, company_id: int, quote_id: int, line_item_date_id: int, line_item_id: int
    ) -> LineItem:
        statement = (
            select(LineItem)
            .join(LineItemDate, LineItemDate.id == LineItem.line_item_date_id)
            .join(Quote, Quote.id == LineItemDate.quote_id)
            .where(LineItem.id == line_item_id)
            .where(LineItem.line_item_date_id == line_item_date_id)
            .where(LineItemDate.quote_id == quote_id)
            .where(Quote.company_id == company_id)
        )
        result = await self.session.execute(statement)
        line_item = result.scalar_one_or_none()
        if line_item is None:
            raise NotFoundError("LineItem", line_item_id)
        return line_item

    async def list_by_quote(self, quote_id: int) -> Dict[int, List[LineItem]]:
        statement = (
            select(LineItem)
            .join(LineItemDate, LineItemDate.id == LineItem.line_item_date_id)
            .where(LineItemDate.quote_id == quote_id)
            .order_by(LineItem.id.asc())
        )
        result = await self.session.execute(statement)

        grouped: Dict[int, List[LineItem]] = defaultdict(list)
        for line_item in result.scalars().all():
            grouped[line_item.line_item_date_id].append(line_item)
        return dict(grouped)

    async def update(self, line_item: LineItem) -> LineItem:
        _validate(line_item)
        line_item.updated_at = datetime.utcnow()
        self.session.add(line_item)
        await self.session.flush()
        await self.session.refresh(line_item)
        return line_item

    async def delete(
        self, company_id: int, quote_id: int, line_item_date_id: int, line_item_id: int
    ) -> None:
        await self.get(company_id, quote_id, line_item_date_id, line_item_id)

        result = await self.session.execute(
            delete(LineItem)
            .where(LineItem.id == line_item_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError("LineItem", line_item_id)
