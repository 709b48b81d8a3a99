from typing import Optional
from fastapi import Depends, Header, status
from fastapi.requests import HTTPConnection
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.api.error import ClientError
from src.app.services.quote_broadcaster import QuoteBroadcaster
from src.app.services.tenant_lock import TenantLock
from src.app.use_cases.tenants.dtos import ActorDTO
from src.app.use_cases.tenants.get_actor import GetActor

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_broadcaster(connection: HTTPConnection) -> QuoteBroadcaster:
    return connection.app.state.broadcaster


def get_tenant_lock(connection: HTTPConnection) -> TenantLock:
    return connection.app.state.tenant_lock


async def resolve_actor(session: AsyncSession, user_id: Optional[int]) -> Optional[ActorDTO]:
    """Actor for the user ID supplied by the authentication proxy, if it exists"""
    if user_id is None:
        return None
    result = await GetActor(SqlAlchemyUserRepository(session)).execute(user_id)
    return result.value if result.is_ok() else None


async def get_current_actor(
    x_user_id: Optional[int] = Header(default=None),
    session: AsyncSession = Depends(get_session),
) -> ActorDTO:
    actor = await resolve_actor(session, x_user_id)
    if actor is None:
        raise ClientError(
            Error(code="UNAUTHENTICATED", message="You need to sign in before continuing"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return actor
