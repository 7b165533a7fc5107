"""In-memory message store and event dispatcher.

This is the only component allowed to mutate known messages. Every
mutation runs to completion, including notifying the affected views,
before the next fetch result or event is considered.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableSequence
from typing import Protocol

from pyzulip._constants import DEFAULT_FETCH_BATCH_SIZE
from pyzulip.models.events import (
    Event,
    HeartbeatEvent,
    MessageEvent,
    ReactionEvent,
    ReactionOp,
    UnexpectedEvent,
    UpdateMessageEvent,
)
from pyzulip.models.message import Message
from pyzulip.models.narrow import Narrow
from pyzulip.models.responses import GetMessagesResult
from pyzulip.state.reconcile import reconcile_messages
from pyzulip.state.repository import MessageRepository

_logger = logging.getLogger(__name__)


class MessageFetcher(Protocol):
    """Structural interface of whatever fetches message history.

    :class:`pyzulip.client.ZulipClient` is the production implementation;
    tests pass fakes.
    """

    async def get_messages(
        self,
        *,
        narrow: Narrow,
        anchor: int | str,
        num_before: int,
        num_after: int,
    ) -> GetMessagesResult: ...


class StoreView(Protocol):
    """What the store needs from a view attached to it."""

    def maybe_add_message(self, message: Message) -> None: ...

    def maybe_update_message(self, message: Message) -> None: ...


class MessageStore:
    """Canonical message cache for one account.

    Parameters
    ----------
    connection
        Fetch collaborator used by views for their initial fetch.
    fetch_batch_size
        Messages a view asks for before the anchor on its initial fetch.
    """

    def __init__(
        self,
        connection: MessageFetcher | None = None,
        *,
        fetch_batch_size: int = DEFAULT_FETCH_BATCH_SIZE,
    ) -> None:
        self.connection = connection
        self.fetch_batch_size = fetch_batch_size
        self._repository = MessageRepository()
        self._views: list[StoreView] = []

    @property
    def messages(self) -> Mapping[int, Message]:
        """Read-only mapping of message id to canonical instance."""
        return self._repository.view

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def register_view(self, view: StoreView) -> None:
        self._views.append(view)

    def unregister_view(self, view: StoreView) -> None:
        self._views = [v for v in self._views if v is not view]

    @property
    def views(self) -> tuple[StoreView, ...]:
        return tuple(self._views)

    # ------------------------------------------------------------------
    # Reconciliation
    # ------------------------------------------------------------------

    def reconcile_messages(self, messages: MutableSequence[Message]) -> None:
        """Add unknown messages and point *messages* at canonical instances.

        See :func:`pyzulip.state.reconcile.reconcile_messages`.
        """
        reconcile_messages(self._repository, messages)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_event(self, event: Event) -> None:
        """Apply one server event."""
        if isinstance(event, MessageEvent):
            self.handle_message_event(event)
        elif isinstance(event, UpdateMessageEvent):
            self.handle_update_message_event(event)
        elif isinstance(event, ReactionEvent):
            self.handle_reaction_event(event)
        elif isinstance(event, HeartbeatEvent):
            return
        elif isinstance(event, UnexpectedEvent):
            _logger.debug("Ignoring unexpected event type=%s id=%d", event.type, event.id)
        else:
            _logger.debug("Ignoring unhandled event %r", event)

    def handle_message_event(self, event: MessageEvent) -> None:
        """Store a new message, replacing any instance with the same id.

        Unlike reconciliation, a pushed new message is authoritative for
        its id.
        """
        message = event.message
        if self._repository.replace(message) is not None:
            _logger.debug("Message event replaced known message_id=%d", message.id)
        for view in self.views:
            view.maybe_add_message(message)

    def handle_update_message_event(self, event: UpdateMessageEvent) -> None:
        """Apply an edit or re-render to a known message."""
        message = self._repository.get(event.message_id)
        if message is None:
            _logger.debug("Ignoring update_message for unknown message_id=%d", event.message_id)
            return

        if event.rendered_content is not None:
            message.content = event.rendered_content
        message.flags = list(event.flags)
        if event.is_me_message is not None:
            message.is_me_message = event.is_me_message
        # Re-renders (link previews etc.) are not edits by a human.
        if event.edit_timestamp is not None and not event.is_rendering_only:
            message.last_edit_timestamp = event.edit_timestamp

        self._notify_updated(message)

    def handle_reaction_event(self, event: ReactionEvent) -> None:
        """Add or remove a reaction on a known message."""
        message = self._repository.get(event.message_id)
        if message is None:
            _logger.debug("Ignoring reaction %s for unknown message_id=%d", event.op, event.message_id)
            return

        reaction = event.reaction
        if event.op == ReactionOp.ADD:
            message.reactions.append(reaction)
        else:
            # Matched on the server's key; emoji_name is display-only.
            key = reaction.key
            message.reactions = [r for r in message.reactions if r.key != key]

        self._notify_updated(message)

    def _notify_updated(self, message: Message) -> None:
        for view in self.views:
            view.maybe_update_message(message)
