"""Quote Broadcaster Implementations

In-process fan-out of quote list changes to subscribed sessions.
"""

import asyncio
import logging
from collections import defaultdict
from typing import Dict
from src.app.services.quote_broadcaster import QuoteBroadcaster, SubscriptionToken, channel_name
from src.domain.quote_events import QuoteEvent

logger = logging.getLogger(__name__)


class InMemoryQuoteBroadcaster(QuoteBroadcaster):
    """
    Broadcaster backed by one bounded asyncio.Queue per session

    - Each session drains its own queue, so a slow session never delays
      the publisher or other sessions
    - Events land in a session's queue in publish order; the mutation
      gateway publishes in commit order
    - A full queue or a released subscription drops the event for that
      session only

    Must be used from a single event loop.
    """

    def __init__(self, queue_size: int = 100):
        """
        Args:
            queue_size: Pending events kept per session before dropping
        """
        self.queue_size = queue_size
        self._channels: Dict[str, Dict[str, SubscriptionToken]] = defaultdict(dict)

    def subscribe(self, company_id: int, session_handle: str) -> SubscriptionToken:
        token = SubscriptionToken(
            company_id=company_id,
            session_handle=session_handle,
            queue=asyncio.Queue(maxsize=self.queue_size),
        )
        self._channels[token.channel][token.token_id] = token
        logger.info(f"Session {session_handle} subscribed to {token.channel}")
        return token

    def unsubscribe(self, token: SubscriptionToken) -> None:
        token.closed = True
        subscribers = self._channels.get(token.channel)
        if subscribers is None or subscribers.pop(token.token_id, None) is None:
            return
        if not subscribers:
            del self._channels[token.channel]
        logger.info(f"Session {token.session_handle} unsubscribed from {token.channel}")

    def publish(self, company_id: int, event: QuoteEvent) -> None:
        channel = channel_name(company_id)
        for token in list(self._channels.get(channel, {}).values()):
            try:
                if token.closed:
                    continue
                token.queue.put_nowait(event)
            except asyncio.QueueFull:
                logger.warning(
                    f"Dropped {event.event_type.value} event for quote {event.quote_id}: "
                    f"session {token.session_handle} on {channel} is not keeping up"
                )
            except Exception as e:
                logger.error(
                    f"Failed to deliver {event.event_type.value} event to session "
                    f"{token.session_handle} on {channel}: {e}"
                )

    def subscriber_count(self, company_id: int) -> int:
        return len(self._channels.get(channel_name(company_id), {}))
