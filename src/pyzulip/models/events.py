"""Server events delivered through the event queue.

Each event kind is a separate model discriminated on ``type``.
:func:`parse_event` turns a raw event dict into one of them; event types
the store has no handler for become :class:`UnexpectedEvent` rather than
failing the whole batch.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from pyzulip.models.message import AnyMessage, MessageFlag
from pyzulip.models.reaction import Reaction, ReactionType


class _EventModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    """Position in the event queue."""


class HeartbeatEvent(_EventModel):
    """Keep-alive sent when a long poll has nothing to deliver."""

    type: Literal["heartbeat"] = "heartbeat"


class MessageEvent(_EventModel):
    """A new message was sent."""

    type: Literal["message"] = "message"
    message: AnyMessage
    flags: list[MessageFlag] | None = None
    """The user's flags on the message; the server sends them beside it."""

    @model_validator(mode="after")
    def _fold_flags(self) -> MessageEvent:
        if self.flags is not None:
            self.message.flags = list(self.flags)
        return self


class UpdateMessageEvent(_EventModel):
    """A message's content changed, by a human edit or a server re-render."""

    type: Literal["update_message"] = "update_message"
    message_id: int
    message_ids: list[int] = Field(default_factory=list)
    user_id: int | None = None
    """Acting user; servers before ``rendering_only`` existed omit it on re-renders."""
    rendering_only: bool | None = None
    edit_timestamp: int | None = None
    rendered_content: str | None = None
    is_me_message: bool | None = None
    flags: list[MessageFlag] = Field(...)
    """The user's flags on the message after the update."""

    @property
    def is_rendering_only(self) -> bool:
        """Whether this update must not count as a human edit."""
        if self.rendering_only is not None:
            return self.rendering_only
        return self.user_id is None


class ReactionOp(enum.StrEnum):
    ADD = "add"
    REMOVE = "remove"


class ReactionEvent(_EventModel):
    """A reaction was added to or removed from a message."""

    type: Literal["reaction"] = "reaction"
    op: ReactionOp
    message_id: int
    reaction_type: ReactionType = ReactionType.UNICODE_EMOJI
    emoji_name: str = ""
    emoji_code: str
    user_id: int

    @property
    def reaction(self) -> Reaction:
        return Reaction(
            reaction_type=self.reaction_type,
            emoji_name=self.emoji_name,
            emoji_code=self.emoji_code,
            user_id=self.user_id,
        )


class UnexpectedEvent(_EventModel):
    """An event of a type this library does not handle."""

    type: str
    raw: dict[str, Any] = Field(default_factory=dict)


KnownEvent = Annotated[
    HeartbeatEvent | MessageEvent | UpdateMessageEvent | ReactionEvent,
    Field(discriminator="type"),
]
Event = HeartbeatEvent | MessageEvent | UpdateMessageEvent | ReactionEvent | UnexpectedEvent

_KNOWN_EVENT_TYPES = frozenset({"heartbeat", "message", "update_message", "reaction"})
_EVENT_ADAPTER: TypeAdapter[HeartbeatEvent | MessageEvent | UpdateMessageEvent | ReactionEvent] = TypeAdapter(
    KnownEvent
)


def parse_event(raw: dict[str, Any]) -> Event:
    """Parse one raw event dict.

    Raises :class:`pydantic.ValidationError` when a known event type is
    malformed.
    """
    event_type = raw.get("type")
    if event_type not in _KNOWN_EVENT_TYPES:
        return UnexpectedEvent(id=raw.get("id", -1), type=str(event_type), raw=dict(raw))
    return _EVENT_ADAPTER.validate_python(raw)
