"""Asyncio Tenant Lock

One asyncio.Lock per company, created on first use and dropped once no
writer holds or waits for it.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict
from src.app.services.tenant_lock import TenantLock


class AsyncioTenantLock(TenantLock):
    """
    Per-company write lock for a single process

    Writes to different companies never wait on each other.
    """

    def __init__(self):
        self._locks: Dict[int, asyncio.Lock] = {}
        # Writers holding or queued on each company's lock
        self._writers: Dict[int, int] = {}

    @asynccontextmanager
    async def hold(self, company_id: int) -> AsyncIterator[None]:
        lock = self._locks.get(company_id)
        if lock is None:
            lock = self._locks[company_id] = asyncio.Lock()
        self._writers[company_id] = self._writers.get(company_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._writers[company_id] -= 1
            if not self._writers[company_id]:
                del self._writers[company_id]
                del self._locks[company_id]

    def active_companies(self) -> int:
        """Number of companies with a lock currently in use"""
        return len(self._locks)
