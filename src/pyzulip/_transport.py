"""HTTP transport with basic auth and JSON decoding."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyzulip._constants import API_PREFIX
from pyzulip._redact import redact_for_log
from pyzulip.config import ZulipConfig
from pyzulip.exceptions import ZulipTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the API modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`ApiTransport`) concrete.
    """

    async def request_json(
        self,
        method: str,
        route: str,
        params: Mapping[str, Any] | None = None,
        *,
        long_poll: bool = False,
    ) -> dict[str, Any]: ...


class ApiTransport:
    """Authenticated JSON transport for the ``/api/v1`` routes of one realm."""

    def __init__(self, config: ZulipConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._auth = aiohttp.BasicAuth(config.email, config.api_key)

    def _url(self, route: str) -> str:
        return f"{self._config.site}{API_PREFIX}{route}"

    async def request_json(
        self,
        method: str,
        route: str,
        params: Mapping[str, Any] | None = None,
        *,
        long_poll: bool = False,
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON object.

        GET parameters go in the query string; other methods send them
        form-encoded, as the server expects. A JSON error body is returned
        as-is even on a 4xx status so the caller can map its ``code``.
        """
        encoded = {key: _encode_param(value) for key, value in (params or {}).items()}
        headers = {"user-agent": self._config.user_agent}
        timeout = aiohttp.ClientTimeout(total=None if long_poll else self._config.request_timeout)
        url = self._url(route)

        _logger.debug("%s %s", method, url)
        if self._config.api_trace_enabled:
            _logger.debug("Request params %s: %s", route, redact_for_log(encoded))

        request_kwargs: dict[str, Any] = {"params": encoded} if method == "GET" else {"data": encoded}
        try:
            async with self._http.request(
                method,
                url,
                auth=self._auth,
                headers=headers,
                timeout=timeout,
                **request_kwargs,
            ) as resp:
                status = resp.status
                text = await resp.text()
        except aiohttp.ClientError as exc:
            raise ZulipTransportError(
                f"Request to {route} failed: {exc}",
                route=route,
            ) from exc

        try:
            body = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ZulipTransportError(
                f"HTTP {status} from {route} is not JSON: {text[:200]}",
                status_code=status,
                route=route,
            ) from exc

        if not isinstance(body, dict) or "result" not in body:
            raise ZulipTransportError(
                f"HTTP {status} from {route} without a result field",
                status_code=status,
                route=route,
            )
        if status >= 500:
            raise ZulipTransportError(
                f"HTTP {status} from {route}: {text[:200]}",
                status_code=status,
                route=route,
            )

        if self._config.api_trace_enabled:
            _logger.debug("Response %s: %s", route, redact_for_log(body))
        return body


def _encode_param(value: Any) -> str:
    """Zulip takes structured parameters as JSON-encoded strings."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))
