import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401
from src.adapter.services.quote_broadcaster import InMemoryQuoteBroadcaster
from src.adapter.services.tenant_lock import AsyncioTenantLock
from src.depends import get_session
from src.domain.company import Company
from src.domain.user import User


@pytest.fixture
def db_url(tmp_path):
    """SQLite file database, one per test"""
    return f"sqlite+aiosqlite:///{tmp_path / 'quotes_test.db'}"


@pytest_asyncio.fixture(scope="function")
async def engine(db_url):
    """Create test database engine with a fresh schema"""
    engine = create_async_engine(db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest.fixture
def broadcaster():
    return InMemoryQuoteBroadcaster(queue_size=10)


@pytest.fixture
def tenant_lock():
    return AsyncioTenantLock()


@pytest_asyncio.fixture
async def tenants(db_session):
    """
    IDs of two companies with one user each:
    KPMG (accountant@kpmg.com) and PwC (eavesdropper@pwc.com)
    """
    kpmg = Company(name="KPMG")
    pwc = Company(name="PwC")
    db_session.add(kpmg)
    db_session.add(pwc)
    await db_session.flush()

    accountant = User(company_id=kpmg.id, email="accountant@kpmg.com")
    eavesdropper = User(company_id=pwc.id, email="eavesdropper@pwc.com")
    db_session.add(accountant)
    db_session.add(eavesdropper)
    await db_session.commit()

    return {
        "kpmg": kpmg.id,
        "pwc": pwc.id,
        "accountant": accountant.id,
        "eavesdropper": eavesdropper.id,
    }


@pytest.fixture
def app(db_session):
    """Application with the session dependency bound to the test session"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    return app


@pytest_asyncio.fixture
async def client(app):
    """Create test client; ASGITransport does not run the lifespan"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
