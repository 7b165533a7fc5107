"""Example data shared by the test modules."""

from __future__ import annotations

import itertools
from typing import Any

from pyzulip.models.events import ReactionEvent, ReactionOp, UpdateMessageEvent
from pyzulip.models.message import DmMessage, DmRecipient, MessageFlag, StreamMessage
from pyzulip.models.narrow import Narrow
from pyzulip.models.reaction import Reaction, ReactionType
from pyzulip.models.responses import GetMessagesResult

SELF_USER = DmRecipient(id=1, email="self@example.com", full_name="Self User")
OTHER_USER = DmRecipient(id=2, email="other@example.com", full_name="Other User")

STREAM_ID = 10
STREAM_NAME = "general"

_message_ids = itertools.count(1000)
_event_ids = itertools.count(1)


def stream_message(
    *,
    id: int | None = None,
    stream_id: int = STREAM_ID,
    topic: str = "test topic",
    content: str = "<p>This is an example stream message.</p>",
    last_edit_timestamp: int | None = None,
    flags: list[MessageFlag] | None = None,
    reactions: list[Reaction] | None = None,
) -> StreamMessage:
    return StreamMessage(
        id=id if id is not None else next(_message_ids),
        sender_id=OTHER_USER.id,
        sender_email=OTHER_USER.email,
        sender_full_name=OTHER_USER.full_name,
        stream_id=stream_id,
        topic=topic,
        display_recipient=STREAM_NAME,
        content=content,
        timestamp=1_678_139_636,
        last_edit_timestamp=last_edit_timestamp,
        flags=list(flags or []),
        reactions=list(reactions or []),
    )


def dm_message(
    *,
    sender: DmRecipient = OTHER_USER,
    to: list[DmRecipient] | None = None,
    id: int | None = None,
    content: str = "<p>This is an example DM.</p>",
) -> DmMessage:
    recipients = {sender.id: sender}
    for user in to or [SELF_USER]:
        recipients[user.id] = user
    return DmMessage(
        id=id if id is not None else next(_message_ids),
        sender_id=sender.id,
        sender_email=sender.email,
        sender_full_name=sender.full_name,
        display_recipient=sorted(recipients.values(), key=lambda u: u.id),
        content=content,
        timestamp=1_678_139_636,
    )


UNICODE_EMOJI_REACTION = Reaction(
    reaction_type=ReactionType.UNICODE_EMOJI,
    emoji_name="thumbs_up",
    emoji_code="1f44d",
    user_id=SELF_USER.id,
)


def update_message_edit_event(
    original: StreamMessage | DmMessage,
    *,
    message_id: int | None = None,
    user_id: int | None = SELF_USER.id,
    rendering_only: bool | None = False,
    rendered_content: str | None = None,
    edit_timestamp: int | None = 1_678_139_999,
    flags: list[MessageFlag] | None = None,
    is_me_message: bool | None = None,
) -> UpdateMessageEvent:
    target = message_id if message_id is not None else original.id
    return UpdateMessageEvent(
        id=next(_event_ids),
        message_id=target,
        message_ids=[target],
        user_id=user_id,
        rendering_only=rendering_only,
        edit_timestamp=edit_timestamp,
        rendered_content=rendered_content,
        is_me_message=is_me_message if is_me_message is not None else original.is_me_message,
        flags=list(flags) if flags is not None else list(original.flags),
    )


def reaction_event(reaction: Reaction, op: ReactionOp, message_id: int) -> ReactionEvent:
    return ReactionEvent(
        id=next(_event_ids),
        op=op,
        message_id=message_id,
        reaction_type=reaction.reaction_type,
        emoji_name=reaction.emoji_name,
        emoji_code=reaction.emoji_code,
        user_id=reaction.user_id,
    )


def next_event_id() -> int:
    return next(_event_ids)


class FakeConnection:
    """Stands in for the HTTP client: returns prepared fetch results."""

    def __init__(self) -> None:
        self._prepared: list[GetMessagesResult] = []
        self.requests: list[dict[str, Any]] = []

    def prepare(self, result: GetMessagesResult) -> None:
        self._prepared.append(result)

    async def get_messages(
        self,
        *,
        narrow: Narrow,
        anchor: int | str,
        num_before: int,
        num_after: int,
    ) -> GetMessagesResult:
        self.requests.append(
            {"narrow": narrow, "anchor": anchor, "num_before": num_before, "num_after": num_after}
        )
        return self._prepared.pop(0)


def newest_result(*, found_oldest: bool, messages: list[StreamMessage | DmMessage]) -> GetMessagesResult:
    return GetMessagesResult(
        anchor=messages[-1].id if messages else 0,
        found_newest=True,
        found_oldest=found_oldest,
        found_anchor=False,
        history_limited=False,
        messages=messages,
    )
