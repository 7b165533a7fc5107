"""Custom exception hierarchy for pyzulip."""

from __future__ import annotations


class ZulipError(Exception):
    """Base exception for all pyzulip errors."""


class ZulipConfigError(ZulipError):
    """Invalid or missing configuration."""


class ZulipStateError(ZulipError):
    """Message store or view used out of order (e.g. fetching twice)."""


class ZulipTransportError(ZulipError):
    """HTTP-level failure (network, non-2xx without an API error, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        route: str = "",
    ) -> None:
        self.status_code = status_code
        self.route = route
        super().__init__(message)


class ZulipApiError(ZulipError):
    """Server answered with ``"result": "error"``."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        route: str = "",
    ) -> None:
        self.code = code
        self.route = route
        super().__init__(message)


class ZulipBadEventQueueError(ZulipApiError):
    """The event queue is gone on the server (code ``BAD_EVENT_QUEUE_ID``).

    The queue has to be registered again and the message store rebuilt
    from a fresh fetch; events delivered in the meantime are lost.
    """
