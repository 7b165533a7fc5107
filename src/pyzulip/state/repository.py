"""Identity-preserving keyed store of known messages."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, ValuesView
from types import MappingProxyType

from pyzulip.models.message import Message


class MessageRepository:
    """Owns the canonical :class:`Message` instance for each message id.

    Readers get the instances through :attr:`view`, a read-only mapping
    over the same dict, so there is never a second copy to drift.
    """

    def __init__(self) -> None:
        self._messages: dict[int, Message] = {}
        self._view: Mapping[int, Message] = MappingProxyType(self._messages)

    @property
    def view(self) -> Mapping[int, Message]:
        return self._view

    def get(self, message_id: int) -> Message | None:
        return self._messages.get(message_id)

    def insert(self, message: Message) -> None:
        """Make *message* canonical for an id that is not yet known."""
        if message.id in self._messages:
            raise ValueError(f"message {message.id} is already in the repository")
        self._messages[message.id] = message

    def replace(self, message: Message) -> Message | None:
        """Make *message* canonical for its id; return the instance it displaced."""
        previous = self._messages.get(message.id)
        self._messages[message.id] = message
        return previous

    def values(self) -> ValuesView[Message]:
        return self._view.values()

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[int]:
        return iter(self._messages)
