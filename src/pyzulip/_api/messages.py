"""Message history endpoint."""

from __future__ import annotations

from pyzulip._api._common import call_api
from pyzulip._transport import Transport
from pyzulip.models.narrow import Narrow
from pyzulip.models.responses import GetMessagesResult


async def get_messages(
    transport: Transport,
    *,
    narrow: Narrow,
    anchor: int | str,
    num_before: int,
    num_after: int,
) -> GetMessagesResult:
    """Fetch messages around *anchor* (an id, ``"newest"`` or ``"oldest"``)."""
    body = await call_api(
        transport,
        "GET",
        "/messages",
        {
            "narrow": narrow.api_encode(),
            "anchor": anchor,
            "num_before": num_before,
            "num_after": num_after,
            "apply_markdown": True,
            "client_gravatar": True,
        },
    )
    return GetMessagesResult.model_validate(body)
