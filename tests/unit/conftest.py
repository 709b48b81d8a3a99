import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.tenant_lock import AsyncioTenantLock
from src.domain.quote import Quote


@pytest.fixture
def mock_uow():
    """Unit of work whose commit/rollback are awaitable mocks"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_broadcaster():
    return MagicMock()


@pytest.fixture
def tenant_lock():
    return AsyncioTenantLock()


@pytest.fixture
def make_quote():
    """Factory for persisted-looking quotes"""

    def _make(quote_id=1, company_id=1, name="First quote"):
        return Quote(
            id=quote_id,
            company_id=company_id,
            name=name,
            created_at=datetime(2024, 1, 1, 9, 0, 0),
            updated_at=datetime(2024, 1, 1, 9, 0, 0),
        )

    return _make
