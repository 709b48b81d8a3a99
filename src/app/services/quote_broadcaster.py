"""Quote Broadcaster Interface

Defines the publish/subscribe contract used to push quote list changes to
every session viewing a company's quote list.
"""

import asyncio
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import AsyncIterator
from src.domain.quote_events import QuoteEvent


def channel_name(company_id: int) -> str:
    return f"quotes:{company_id}"


@dataclass(eq=False)
class SubscriptionToken:
    """
    Handle returned by subscribe()

    Holds the session's pending events. Iterating it yields events as they
    arrive; pass it to unsubscribe() to release it.
    """

    company_id: int
    session_handle: str
    queue: asyncio.Queue
    token_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    closed: bool = False

    @property
    def channel(self) -> str:
        return channel_name(self.company_id)

    async def next_event(self) -> QuoteEvent:
        return await self.queue.get()

    def __aiter__(self) -> AsyncIterator[QuoteEvent]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[QuoteEvent]:
        while not self.closed:
            yield await self.queue.get()


class QuoteBroadcaster(ABC):
    """
    Per-company fan-out of quote list changes

    Delivery is best-effort and live only: sessions subscribing after a
    publish never see it, and publish never raises because of a
    subscriber's state.
    """

    @abstractmethod
    def subscribe(self, company_id: int, session_handle: str) -> SubscriptionToken:
        """
        Register a session on the company's channel

        Args:
            company_id: Company whose quote list the session views
            session_handle: Opaque identifier of the session (used in logs)

        Returns:
            SubscriptionToken to read events from and to unsubscribe with
        """
        pass

    @abstractmethod
    def unsubscribe(self, token: SubscriptionToken) -> None:
        """Release a subscription. Unsubscribing twice is a no-op."""
        pass

    @abstractmethod
    def publish(self, company_id: int, event: QuoteEvent) -> None:
        """
        Deliver event to every session currently subscribed to the company

        Never blocks and never raises.
        """
        pass

    @abstractmethod
    def subscriber_count(self, company_id: int) -> int:
        pass
