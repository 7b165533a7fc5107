"""Message list view model.

A :class:`MessageListView` is the state behind one scrollback list: the
messages of one narrow, in order, plus whether the first fetch is done.
Listeners are told once per change that reaches the list.
"""

from __future__ import annotations

import logging

from pyzulip.exceptions import ZulipConfigError, ZulipStateError
from pyzulip.models.message import Message
from pyzulip.models.narrow import CombinedFeedNarrow, Narrow
from pyzulip.state.notifier import ChangeNotifier
from pyzulip.state.store import MessageStore

_logger = logging.getLogger(__name__)


class MessageListView(ChangeNotifier):
    """Messages of one narrow, kept in sync with a :class:`MessageStore`.

    Until :meth:`fetch_initial` completes the view is not ``fetched``
    and ignores live events: its first fetch will include them.
    """

    def __init__(self, *, store: MessageStore, narrow: Narrow) -> None:
        super().__init__()
        self.store = store
        self.narrow = narrow
        self.messages: list[Message] = []
        self.fetched = False
        self.have_oldest = False

    @classmethod
    def init(cls, *, store: MessageStore, narrow: Narrow | None = None) -> MessageListView:
        """Create a view and attach it to *store*."""
        view = cls(store=store, narrow=narrow if narrow is not None else CombinedFeedNarrow())
        store.register_view(view)
        return view

    def contains_message_id(self, message_id: int) -> bool:
        return any(m.id == message_id for m in self.messages)

    async def fetch_initial(self) -> None:
        """Fetch the newest messages of the narrow and notify once."""
        if self.fetched:
            raise ZulipStateError("fetch_initial called on an already fetched view")
        connection = self.store.connection
        if connection is None:
            raise ZulipConfigError("message store has no connection to fetch with")

        result = await connection.get_messages(
            narrow=self.narrow,
            anchor="newest",
            num_before=self.store.fetch_batch_size,
            num_after=0,
        )
        messages: list[Message] = list(result.messages)
        self.store.reconcile_messages(messages)
        self.messages = messages
        self.have_oldest = result.found_oldest
        self.fetched = True
        _logger.debug("Fetched %d messages for %r (found_oldest=%s)", len(messages), self.narrow, result.found_oldest)
        self.notify_listeners()

    def maybe_add_message(self, message: Message) -> None:
        """Show a newly arrived message if it belongs here."""
        if not self.fetched or not self.narrow.contains_message(message):
            return
        for index, existing in enumerate(self.messages):
            if existing.id == message.id:
                self.messages[index] = message
                break
        else:
            self.messages.append(message)
        self.notify_listeners()

    def maybe_update_message(self, message: Message) -> None:
        """Re-render if a changed message is on this list."""
        if not self.fetched or not self.contains_message_id(message.id):
            return
        self.notify_listeners()

    def dispose(self) -> None:
        self.store.unregister_view(self)
        super().dispose()
