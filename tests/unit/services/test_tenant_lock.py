"""Unit tests for the per-company write lock"""

import asyncio
import pytest

from src.adapter.services.tenant_lock import AsyncioTenantLock


@pytest.mark.asyncio
class TestAsyncioTenantLock:
    async def test_same_company_is_serialized(self):
        lock = AsyncioTenantLock()
        trace = []

        async def write(name):
            async with lock.hold(1):
                trace.append(f"{name}:start")
                await asyncio.sleep(0.01)
                trace.append(f"{name}:end")

        await asyncio.gather(write("a"), write("b"))

        assert trace in (
            ["a:start", "a:end", "b:start", "b:end"],
            ["b:start", "b:end", "a:start", "a:end"],
        )

    async def test_different_companies_do_not_wait(self):
        lock = AsyncioTenantLock()
        entered = asyncio.Event()

        async def hold_company_one():
            async with lock.hold(1):
                await asyncio.wait_for(entered.wait(), timeout=1)

        async def hold_company_two():
            async with lock.hold(2):
                entered.set()

        await asyncio.gather(hold_company_one(), hold_company_two())

        assert entered.is_set()

    async def test_released_after_error(self):
        lock = AsyncioTenantLock()

        with pytest.raises(RuntimeError):
            async with lock.hold(1):
                raise RuntimeError("boom")

        async with lock.hold(1):
            pass

    async def test_lock_dropped_once_unused(self):
        lock = AsyncioTenantLock()
        release = asyncio.Event()

        async def first():
            async with lock.hold(1):
                await release.wait()

        holder = asyncio.create_task(first())
        await asyncio.sleep(0)
        waiter = asyncio.create_task(self._enter(lock, 1))
        await asyncio.sleep(0)
        assert lock.active_companies() == 1

        release.set()
        await asyncio.gather(holder, waiter)

        assert lock.active_companies() == 0

    async def test_destroyed_company_leaves_no_lock_behind(self):
        lock = AsyncioTenantLock()

        for company_id in range(50):
            async with lock.hold(company_id):
                pass

        assert lock.active_companies() == 0

    @staticmethod
    async def _enter(lock, company_id):
        async with lock.hold(company_id):
            pass
