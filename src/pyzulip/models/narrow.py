"""Narrows: which messages a message list shows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pyzulip.models.message import DmMessage, Message, StreamMessage


@dataclass(frozen=True)
class Narrow:
    """Base for narrows.

    ``contains_message`` mirrors the server-side filter that
    ``api_encode`` produces, so a live event can be routed to the views
    that would have fetched it.
    """

    def contains_message(self, message: Message) -> bool:
        raise NotImplementedError

    def api_encode(self) -> list[dict[str, Any]]:
        raise NotImplementedError


@dataclass(frozen=True)
class CombinedFeedNarrow(Narrow):
    """Every message the user can see."""

    def contains_message(self, message: Message) -> bool:
        return True

    def api_encode(self) -> list[dict[str, Any]]:
        return []


@dataclass(frozen=True)
class StreamNarrow(Narrow):
    stream_id: int

    def contains_message(self, message: Message) -> bool:
        return isinstance(message, StreamMessage) and message.stream_id == self.stream_id

    def api_encode(self) -> list[dict[str, Any]]:
        return [{"operator": "stream", "operand": self.stream_id}]


@dataclass(frozen=True)
class TopicNarrow(Narrow):
    stream_id: int
    topic: str

    def contains_message(self, message: Message) -> bool:
        return (
            isinstance(message, StreamMessage)
            and message.stream_id == self.stream_id
            and message.topic == self.topic
        )

    def api_encode(self) -> list[dict[str, Any]]:
        return [
            {"operator": "stream", "operand": self.stream_id},
            {"operator": "topic", "operand": self.topic},
        ]


@dataclass(frozen=True)
class DmNarrow(Narrow):
    """One direct-message conversation, identified by all its participants."""

    all_recipient_ids: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "all_recipient_ids", tuple(sorted(set(self.all_recipient_ids))))

    def contains_message(self, message: Message) -> bool:
        return isinstance(message, DmMessage) and message.all_recipient_ids == self.all_recipient_ids

    def api_encode(self) -> list[dict[str, Any]]:
        return [{"operator": "dm", "operand": list(self.all_recipient_ids)}]
