"""Typed results of the API routes pyzulip calls."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pyzulip.models.events import Event, parse_event
from pyzulip.models.message import AnyMessage


class _ResultModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class GetMessagesResult(_ResultModel):
    """Result of ``GET /messages``."""

    anchor: int = 0
    found_newest: bool = False
    found_oldest: bool = False
    found_anchor: bool = False
    history_limited: bool = False
    messages: list[AnyMessage] = Field(default_factory=list)


class RegisterQueueResult(_ResultModel):
    """Result of ``POST /register``."""

    queue_id: str
    last_event_id: int
    zulip_feature_level: int | None = None


class GetEventsResult(_ResultModel):
    """Result of ``GET /events``."""

    events: list[Event] = Field(default_factory=list)
    queue_id: str | None = None

    @field_validator("events", mode="before")
    @classmethod
    def _parse_events(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [parse_event(item) if isinstance(item, dict) else item for item in value]
