"""Quote Stream Route

WebSocket that pushes the actor's company quote list changes as JSON
messages:

- ``{"event": "created", "quote_id": 1, "quote": {...}}`` insert at top
- ``{"event": "updated", "quote_id": 1, "quote": {...}}`` replace in place
- ``{"event": "destroyed", "quote_id": 1}`` remove
"""

import asyncio
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Header, WebSocket, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.services.quote_broadcaster import QuoteBroadcaster, SubscriptionToken
from src.depends import get_broadcaster, get_session, resolve_actor

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Quote Stream"])


@router.websocket("/quotes/stream")
async def stream_quotes(
    websocket: WebSocket,
    x_user_id: Optional[int] = Header(default=None),
    session: AsyncSession = Depends(get_session),
    broadcaster: QuoteBroadcaster = Depends(get_broadcaster),
):
    actor = await resolve_actor(session, x_user_id)
    # The actor is all we need from the database
    await session.close()
    if actor is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    token = broadcaster.subscribe(actor.company_id, session_handle=f"user:{actor.user_id}")
    forwarder = asyncio.create_task(_forward_events(websocket, token))
    try:
        # Only disconnects are expected from the client
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        forwarder.cancel()
        broadcaster.unsubscribe(token)


async def _forward_events(websocket: WebSocket, token: SubscriptionToken) -> None:
    try:
        async for event in token:
            await websocket.send_json(event.to_message())
    except asyncio.CancelledError:
        raise
    except Exception as e:
        # Session went away mid-send; the receive loop will see the disconnect
        logger.info(f"Stopped streaming to {token.session_handle}: {e}")
