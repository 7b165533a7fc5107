"""Base model and enum for Zulip API payloads.

Every Zulip payload model inherits from :class:`ZulipBaseModel`, which
ignores keys it does not declare so newer servers can add fields freely.

String enums inherit from :class:`ZulipStrEnum`, which adds an
``UNKNOWN`` member and a ``_missing_`` hook returning it for any value
without a mapped member.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class ZulipStrEnum(enum.StrEnum):
    """Base for Zulip API string enums.

    Every subclass **must** define ``UNKNOWN = "unknown"``.
    """

    @classmethod
    def _missing_(cls, value: object) -> ZulipStrEnum:
        # pylint: disable=no-member
        if hasattr(cls, "UNKNOWN"):
            unknown: ZulipStrEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class ZulipBaseModel(BaseModel):
    """Base for mutable Zulip payload models.

    Instances are *not* frozen: the message store updates the canonical
    instance of a message in place when edits and reactions arrive.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )
