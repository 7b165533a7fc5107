"""High-level async client for the Zulip API."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import aiohttp

from pyzulip._api import events as _events_api
from pyzulip._api import messages as _messages_api
from pyzulip._constants import MESSAGE_EVENT_TYPES
from pyzulip._transport import ApiTransport
from pyzulip.config import ZulipConfig
from pyzulip.exceptions import ZulipError
from pyzulip.ingestion.events import pump_events
from pyzulip.models.narrow import Narrow
from pyzulip.models.responses import GetEventsResult, GetMessagesResult, RegisterQueueResult
from pyzulip.state.store import MessageStore

_logger = logging.getLogger(__name__)


class ZulipClient:
    """Async client for one Zulip account.

    Usage::

        async with ZulipClient(config) as client:
            store = client.new_store()
            view = MessageListView.init(store=store)
            view.add_listener(redraw)
            queue = await client.register_queue()
            await view.fetch_initial()
            await client.pump_events(store, queue)
    """

    def __init__(
        self,
        config: ZulipConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: ApiTransport | None = None

    @property
    def config(self) -> ZulipConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ZulipClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = ApiTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> ApiTransport:
        if self._transport is None:
            raise ZulipError("Client not initialized. Use 'async with ZulipClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Store wiring
    # ------------------------------------------------------------------

    def new_store(self) -> MessageStore:
        """Create an empty message store that fetches through this client."""
        return MessageStore(self, fetch_batch_size=self._config.fetch_batch_size)

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def get_messages(
        self,
        *,
        narrow: Narrow,
        anchor: int | str,
        num_before: int,
        num_after: int,
    ) -> GetMessagesResult:
        """Fetch message history; satisfies :class:`pyzulip.state.store.MessageFetcher`."""
        return await _messages_api.get_messages(
            self._require_transport(),
            narrow=narrow,
            anchor=anchor,
            num_before=num_before,
            num_after=num_after,
        )

    async def register_queue(self, event_types: Sequence[str] = MESSAGE_EVENT_TYPES) -> RegisterQueueResult:
        """Register an event queue for *event_types*."""
        result = await _events_api.register_queue(self._require_transport(), event_types=event_types)
        _logger.debug("Registered queue_id=%s last_event_id=%d", result.queue_id, result.last_event_id)
        return result

    async def get_events(self, queue_id: str, last_event_id: int) -> GetEventsResult:
        """One long poll of the event queue."""
        return await _events_api.get_events(
            self._require_transport(),
            queue_id=queue_id,
            last_event_id=last_event_id,
        )

    async def pump_events(
        self,
        store: MessageStore,
        queue: RegisterQueueResult,
        *,
        max_polls: int | None = None,
    ) -> int:
        """Feed events from *queue* into *store* until cancelled.

        Returns the last applied event id when *max_polls* is reached.
        """
        return await pump_events(
            get_events=self.get_events,
            handle_event=store.handle_event,
            queue_id=queue.queue_id,
            last_event_id=queue.last_event_id,
            max_polls=max_polls,
            retry_delay=self._config.event_queue_retry_delay,
        )
