"""Message models.

A message is either a stream (channel) message or a direct message; the
server tells them apart with the ``type`` key. Both share the fields the
message store reconciles and mutates.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter

from pyzulip.models._base import ZulipBaseModel, ZulipStrEnum
from pyzulip.models.reaction import Reaction


class MessageFlag(ZulipStrEnum):
    """Per-user message flags."""

    READ = "read"
    STARRED = "starred"
    COLLAPSED = "collapsed"
    MENTIONED = "mentioned"
    WILDCARD_MENTIONED = "wildcard_mentioned"
    HAS_ALERT_WORD = "has_alert_word"
    HISTORICAL = "historical"
    UNKNOWN = "unknown"


class Message(ZulipBaseModel):
    """Fields shared by every message kind.

    ``id`` is the identity of a message. Several instances may carry the
    same id (a fetch result and a pushed event, say); the message store
    decides which one is canonical.
    """

    id: int
    sender_id: int = 0
    sender_email: str = ""
    sender_full_name: str = ""
    recipient_id: int = 0
    content: str = ""
    """Rendered HTML content."""
    content_type: str = "text/html"
    timestamp: int = 0
    """Send time, epoch seconds."""
    last_edit_timestamp: int | None = None
    """Time of the last human edit, epoch seconds; ``None`` if never edited."""
    flags: list[MessageFlag] = Field(default_factory=list)
    is_me_message: bool = False
    """Whether this is a ``/me`` action message."""
    reactions: list[Reaction] = Field(default_factory=list)


class StreamMessage(Message):
    """A message sent to a stream topic."""

    type: Literal["stream"] = "stream"
    stream_id: int = 0
    topic: str = Field(default="", validation_alias=AliasChoices("subject", "topic"))
    display_recipient: str = ""
    """Stream name at send time."""


class DmRecipient(BaseModel):
    """A participant in a direct message conversation."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    email: str = ""
    full_name: str = ""


class DmMessage(Message):
    """A direct message (one-on-one or group)."""

    type: Literal["private"] = "private"
    display_recipient: list[DmRecipient] = Field(default_factory=list)
    """All participants, including the sender."""

    @property
    def all_recipient_ids(self) -> tuple[int, ...]:
        """Sorted ids of every participant in the conversation."""
        ids = {recipient.id for recipient in self.display_recipient}
        ids.add(self.sender_id)
        return tuple(sorted(ids))


AnyMessage = Annotated[StreamMessage | DmMessage, Field(discriminator="type")]

_MESSAGE_ADAPTER: TypeAdapter[StreamMessage | DmMessage] = TypeAdapter(AnyMessage)


def parse_message(raw: dict[str, Any]) -> StreamMessage | DmMessage:
    """Parse one server message dict into its concrete model."""
    return _MESSAGE_ADAPTER.validate_python(raw)
