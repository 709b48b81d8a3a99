"""SQLAlchemy Company Repository Implementation

Company deletion removes the whole tenant subtree explicitly, leaves first,
within the caller's unit of work.
"""

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.company_repository import CompanyRepository
from src.domain.company import Company
from src.domain.errors import NotFoundError
from src.domain.line_item import LineItem
from src.domain.line_item_date import LineItemDate
from src.domain.quote import Quote
from src.domain.user import User
from src.domain.validation import require_text


class SqlAlchemyCompanyRepository(CompanyRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, company: Company) -> Company:
        company.name = require_text(company.name, "name")
        self.session.add(company)
        await self.session.flush()
        await self.session.refresh(company)
        return company

    async def get(self, company_id: int) -> Company:
        statement = select(Company).where(Company.id == company_id)
        result = await self.session.execute(statement)
        company = result.scalar_one_or_none()
        if company is None:
            raise NotFoundError("Company", company_id)
        return company

    async def delete(self, company_id: int) -> None:
        await self.get(company_id)

        quote_ids = select(Quote.id).where(Quote.company_id == company_id)
        date_ids = select(LineItemDate.id).where(LineItemDate.quote_id.in_(quote_ids))

        for statement in (
            delete(LineItem).where(LineItem.line_item_date_id.in_(date_ids)),
            delete(LineItemDate).where(LineItemDate.quote_id.in_(quote_ids)),
            delete(Quote).where(Quote.company_id == company_id),
            delete(User).where(User.company_id == company_id),
        ):
            await self.session.execute(statement.execution_options(synchronize_session=False))

        result = await self.session.execute(
            delete(Company)
            .where(Company.id == company_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError("Company", company_id)
