"""Event queue endpoints."""

from __future__ import annotations

from collections.abc import Sequence

from pyzulip._api._common import call_api
from pyzulip._transport import Transport
from pyzulip.models.responses import GetEventsResult, RegisterQueueResult


async def register_queue(transport: Transport, *, event_types: Sequence[str]) -> RegisterQueueResult:
    """Register an event queue receiving *event_types*."""
    body = await call_api(
        transport,
        "POST",
        "/register",
        {
            "event_types": list(event_types),
            "apply_markdown": True,
            "client_gravatar": True,
        },
    )
    return RegisterQueueResult.model_validate(body)


async def get_events(
    transport: Transport,
    *,
    queue_id: str,
    last_event_id: int,
    dont_block: bool = False,
) -> GetEventsResult:
    """Long-poll for events after *last_event_id*."""
    body = await call_api(
        transport,
        "GET",
        "/events",
        {
            "queue_id": queue_id,
            "last_event_id": last_event_id,
            "dont_block": dont_block,
        },
        long_poll=not dont_block,
    )
    return GetEventsResult.model_validate(body)
