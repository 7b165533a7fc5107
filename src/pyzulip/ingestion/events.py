"""Event queue polling.

This module owns the long-poll loop for the event queue. The HTTP
routes live in :mod:`pyzulip._api.events`; what an event does to the
messages is decided by :class:`pyzulip.state.store.MessageStore`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from pyzulip.exceptions import ZulipTransportError
from pyzulip.models.events import Event
from pyzulip.models.responses import GetEventsResult

_logger = logging.getLogger(__name__)


async def pump_events(
    *,
    get_events: Callable[[str, int], Awaitable[GetEventsResult]],
    handle_event: Callable[[Event], None],
    queue_id: str,
    last_event_id: int,
    max_polls: int | None = None,
    retry_delay: float = 1.0,
) -> int:
    """Poll the event queue and apply each event in arrival order.

    Parameters
    ----------
    get_events
        Called as ``get_events(queue_id, last_event_id)``; one long poll.
    handle_event
        Applies one event, typically ``MessageStore.handle_event``.
    max_polls
        Stop after this many polls (successful or not). ``None`` polls
        until cancelled or the queue is gone.
    retry_delay
        Seconds to wait after a transport failure before polling again.

    Returns
    -------
    int
        The id of the last event applied, to resume polling from.

    :class:`pyzulip.exceptions.ZulipBadEventQueueError` propagates: the
    queue has to be registered again by the caller.
    """
    polls = 0
    while max_polls is None or polls < max_polls:
        polls += 1
        try:
            result = await get_events(queue_id, last_event_id)
        except ZulipTransportError:
            _logger.debug("Event poll failed for queue_id=%s; retrying", queue_id, exc_info=True)
            if retry_delay > 0:
                await asyncio.sleep(retry_delay)
            continue

        for event in result.events:
            # Events already applied can be re-delivered after a retried poll.
            if event.id <= last_event_id:
                _logger.debug("Skipping replayed event id=%d", event.id)
                continue
            handle_event(event)
            last_event_id = event.id

    return last_event_id
