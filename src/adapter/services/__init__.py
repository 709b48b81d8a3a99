from .unit_of_work import SqlAlchemyUnitOfWork
from .quote_broadcaster import InMemoryQuoteBroadcaster
from .tenant_lock import AsyncioTenantLock

__all__ = [
    "SqlAlchemyUnitOfWork",
    "InMemoryQuoteBroadcaster",
    "AsyncioTenantLock",
]
