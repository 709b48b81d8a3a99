"""Tenant Lock Interface

Serializes writes within one company so that uniqueness checks and the
commit that follows them cannot interleave with another write.
"""

from abc import ABC, abstractmethod
from typing import AsyncContextManager


class TenantLock(ABC):
    @abstractmethod
    def hold(self, company_id: int) -> AsyncContextManager[None]:
        """Async context manager that holds the company's write lock"""
        pass
