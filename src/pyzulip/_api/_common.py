"""Shared helpers for the API route modules.

This module centralizes:
- sending a request through the transport
- mapping ``"result": "error"`` bodies to exceptions

It is internal to pyzulip and may change at any time.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pyzulip._constants import BAD_EVENT_QUEUE_ID_CODE
from pyzulip._transport import Transport
from pyzulip.exceptions import ZulipApiError, ZulipBadEventQueueError


def _raise_for_code(*, route: str, code: str, message: str) -> None:
    if code == BAD_EVENT_QUEUE_ID_CODE:
        raise ZulipBadEventQueueError(
            f"{route} failed: code={code} message={message}",
            code=code,
            route=route,
        )
    raise ZulipApiError(
        f"{route} failed: code={code} message={message}",
        code=code,
        route=route,
    )


async def call_api(
    transport: Transport,
    method: str,
    route: str,
    params: Mapping[str, Any] | None = None,
    *,
    long_poll: bool = False,
) -> dict[str, Any]:
    """Send a request and return the body of a successful response."""
    body = await transport.request_json(method, route, params, long_poll=long_poll)
    if body.get("result") != "success":
        _raise_for_code(
            route=route,
            code=str(body.get("code", "")),
            message=str(body.get("msg", "")),
        )
    return body
