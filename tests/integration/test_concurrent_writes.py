"""Integration tests for concurrent mutations of one company

Each concurrent request gets its own session, as under the API; the
company write lock is shared.
"""

import asyncio
import pytest

from src.adapter.repositories.line_item_date_repository import SqlAlchemyLineItemDateRepository
from src.adapter.repositories.quote_repository import SqlAlchemyQuoteRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.quotes import (
    CreateLineItemDate,
    CreateLineItemDateCommandDTO,
    CreateQuote,
    CreateQuoteCommandDTO,
)
from src.domain.line_item_date import LineItemDate
from sqlmodel import select


@pytest.mark.asyncio
class TestConcurrentWrites:
    async def test_only_one_duplicate_date_wins(self, session_factory, tenants, broadcaster, tenant_lock):
        """
        Given: A quote without dates
        When: Several requests add 2024-01-01 at the same time
        Then: Exactly one succeeds and the rest get DATE_ALREADY_EXISTS
        """
        kpmg = tenants["kpmg"]
        async with session_factory() as session:
            quote = (
                await CreateQuote(
                    SqlAlchemyUnitOfWork(session),
                    SqlAlchemyQuoteRepository(session),
                    broadcaster,
                    tenant_lock,
                ).execute(CreateQuoteCommandDTO(company_id=kpmg, name="Contended"))
            ).value

        async def add_date():
            async with session_factory() as session:
                use_case = CreateLineItemDate(
                    SqlAlchemyUnitOfWork(session),
                    SqlAlchemyQuoteRepository(session),
                    SqlAlchemyLineItemDateRepository(session),
                    tenant_lock,
                )
                return await use_case.execute(
                    CreateLineItemDateCommandDTO(
                        company_id=kpmg, quote_id=quote.id, date="2024-01-01"
                    )
                )

        results = await asyncio.gather(*(add_date() for _ in range(4)))

        assert sum(1 for r in results if r.is_ok()) == 1
        assert sorted(r.error.code for r in results if r.is_err()) == ["DATE_ALREADY_EXISTS"] * 3

        async with session_factory() as session:
            rows = (
                await session.execute(select(LineItemDate).where(LineItemDate.quote_id == quote.id))
            ).scalars().all()
        assert len(rows) == 1

    async def test_concurrent_creates_publish_in_commit_order(
        self, session_factory, tenants, broadcaster, tenant_lock
    ):
        kpmg = tenants["kpmg"]
        token = broadcaster.subscribe(kpmg, session_handle="user:observer")

        async def create(name):
            async with session_factory() as session:
                return await CreateQuote(
                    SqlAlchemyUnitOfWork(session),
                    SqlAlchemyQuoteRepository(session),
                    broadcaster,
                    tenant_lock,
                ).execute(CreateQuoteCommandDTO(company_id=kpmg, name=name))

        results = await asyncio.gather(*(create(f"Q{i}") for i in range(3)))

        created_ids = [r.value.id for r in results]
        published_ids = [(await token.next_event()).quote_id for _ in range(3)]
        assert sorted(published_ids) == sorted(created_ids)
        # Ids are assigned in commit order, so events arrive in ascending id order
        assert published_ids == sorted(published_ids)
        assert token.queue.empty()
