"""Emoji reaction model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pyzulip.models._base import ZulipStrEnum


class ReactionType(ZulipStrEnum):
    """Which emoji namespace ``emoji_code`` belongs to."""

    UNICODE_EMOJI = "unicode_emoji"
    REALM_EMOJI = "realm_emoji"
    ZULIP_EXTRA_EMOJI = "zulip_extra_emoji"
    UNKNOWN = "unknown"


ReactionKey = tuple[ReactionType, str, int]


class Reaction(BaseModel):
    """One user's emoji reaction on a message.

    The server identifies a reaction by message, user, reaction type and
    emoji code. ``emoji_name`` is display-only: the same code can arrive
    under different names (aliases, renamed realm emoji).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    reaction_type: ReactionType = ReactionType.UNICODE_EMOJI
    emoji_name: str = ""
    emoji_code: str = Field(...)
    user_id: int = Field(...)

    @property
    def key(self) -> ReactionKey:
        """Identity of this reaction within one message."""
        return (self.reaction_type, self.emoji_code, self.user_id)
