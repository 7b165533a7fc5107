"""Data models for Zulip API payloads."""

from pyzulip.models._base import ZulipBaseModel, ZulipStrEnum
from pyzulip.models.events import (
    Event,
    HeartbeatEvent,
    MessageEvent,
    ReactionEvent,
    ReactionOp,
    UnexpectedEvent,
    UpdateMessageEvent,
    parse_event,
)
from pyzulip.models.message import (
    AnyMessage,
    DmMessage,
    DmRecipient,
    Message,
    MessageFlag,
    StreamMessage,
    parse_message,
)
from pyzulip.models.narrow import CombinedFeedNarrow, DmNarrow, Narrow, StreamNarrow, TopicNarrow
from pyzulip.models.reaction import Reaction, ReactionKey, ReactionType
from pyzulip.models.responses import GetEventsResult, GetMessagesResult, RegisterQueueResult

__all__ = [
    "AnyMessage",
    "CombinedFeedNarrow",
    "DmMessage",
    "DmNarrow",
    "DmRecipient",
    "Event",
    "GetEventsResult",
    "GetMessagesResult",
    "HeartbeatEvent",
    "Message",
    "MessageEvent",
    "MessageFlag",
    "Narrow",
    "Reaction",
    "ReactionEvent",
    "ReactionKey",
    "ReactionOp",
    "ReactionType",
    "RegisterQueueResult",
    "StreamMessage",
    "StreamNarrow",
    "TopicNarrow",
    "UnexpectedEvent",
    "UpdateMessageEvent",
    "ZulipBaseModel",
    "ZulipStrEnum",
    "parse_event",
    "parse_message",
]
