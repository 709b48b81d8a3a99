"""Integration tests for tenant administration"""

import pytest
from sqlmodel import select

from src.adapter.repositories.company_repository import SqlAlchemyCompanyRepository
from src.adapter.repositories.line_item_date_repository import SqlAlchemyLineItemDateRepository
from src.adapter.repositories.line_item_repository import SqlAlchemyLineItemRepository
from src.adapter.repositories.quote_repository import SqlAlchemyQuoteRepository
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.quotes import (
    CreateLineItem,
    CreateLineItemCommandDTO,
    CreateLineItemDate,
    CreateLineItemDateCommandDTO,
    CreateQuote,
    CreateQuoteCommandDTO,
)
from src.app.use_cases.tenants import (
    CreateCompany,
    CreateCompanyCommandDTO,
    CreateUser,
    CreateUserCommandDTO,
    DestroyCompany,
    GetActor,
)
from src.domain.line_item import LineItem
from src.domain.line_item_date import LineItemDate
from src.domain.quote import Quote
from src.domain.user import User


@pytest.mark.asyncio
class TestCompanyLifecycle:
    async def test_create_company_and_user(self, db_session):
        uow = SqlAlchemyUnitOfWork(db_session)
        company_repo = SqlAlchemyCompanyRepository(db_session)
        user_repo = SqlAlchemyUserRepository(db_session)

        company = (await CreateCompany(uow, company_repo).execute(
            CreateCompanyCommandDTO(name="Deloitte")
        )).value
        actor = (await CreateUser(uow, company_repo, user_repo).execute(
            CreateUserCommandDTO(company_id=company.id, email="Partner@Deloitte.com")
        )).value

        assert actor.company_id == company.id
        assert actor.email == "partner@deloitte.com"
        assert (await GetActor(user_repo).execute(actor.user_id)).value.name == "Partner"

    async def test_blank_company_name_rejected(self, db_session):
        result = await CreateCompany(
            SqlAlchemyUnitOfWork(db_session), SqlAlchemyCompanyRepository(db_session)
        ).execute(CreateCompanyCommandDTO(name="  "))

        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.details["field"] == "name"

    async def test_email_without_at_rejected(self, db_session, tenants):
        result = await CreateUser(
            SqlAlchemyUnitOfWork(db_session),
            SqlAlchemyCompanyRepository(db_session),
            SqlAlchemyUserRepository(db_session),
        ).execute(CreateUserCommandDTO(company_id=tenants["kpmg"], email="nobody"))

        assert result.error.code == "VALIDATION_ERROR"

    async def test_destroy_company_cascades_to_everything_it_owns(
        self, db_session, tenants, broadcaster, tenant_lock
    ):
        kpmg, pwc = tenants["kpmg"], tenants["pwc"]
        uow = SqlAlchemyUnitOfWork(db_session)
        quotes = SqlAlchemyQuoteRepository(db_session)
        dates = SqlAlchemyLineItemDateRepository(db_session)
        items = SqlAlchemyLineItemRepository(db_session)

        for company_id in (kpmg, pwc):
            quote = (await CreateQuote(uow, quotes, broadcaster, tenant_lock).execute(
                CreateQuoteCommandDTO(company_id=company_id, name="Q")
            )).value
            line_item_date = (await CreateLineItemDate(uow, quotes, dates, tenant_lock).execute(
                CreateLineItemDateCommandDTO(company_id=company_id, quote_id=quote.id, date="2024-01-01")
            )).value
            await CreateLineItem(uow, dates, items, tenant_lock).execute(
                CreateLineItemCommandDTO(
                    company_id=company_id,
                    quote_id=quote.id,
                    line_item_date_id=line_item_date.id,
                    name="Room",
                    quantity=1,
                    unit_price="250.00",
                )
            )

        result = await DestroyCompany(
            uow, SqlAlchemyCompanyRepository(db_session), tenant_lock
        ).execute(kpmg)

        assert result.is_ok()
        db_session.expunge_all()
        remaining_quotes = (await db_session.execute(select(Quote))).scalars().all()
        remaining_users = (await db_session.execute(select(User))).scalars().all()
        assert [q.company_id for q in remaining_quotes] == [pwc]
        assert [u.company_id for u in remaining_users] == [pwc]
        assert len((await db_session.execute(select(LineItemDate))).scalars().all()) == 1
        assert len((await db_session.execute(select(LineItem))).scalars().all()) == 1

    async def test_destroy_unknown_company(self, db_session, tenant_lock):
        result = await DestroyCompany(
            SqlAlchemyUnitOfWork(db_session), SqlAlchemyCompanyRepository(db_session), tenant_lock
        ).execute(999)

        assert result.error.code == "COMPANY_NOT_FOUND"
