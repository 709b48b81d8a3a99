from .unit_of_work import UnitOfWork
from .quote_broadcaster import QuoteBroadcaster, SubscriptionToken, channel_name
from .tenant_lock import TenantLock

__all__ = [
    "UnitOfWork",
    "QuoteBroadcaster",
    "SubscriptionToken",
    "channel_name",
    "TenantLock",
]
