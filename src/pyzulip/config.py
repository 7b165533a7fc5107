"""Client configuration for pyzulip."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyzulip._constants import DEFAULT_FETCH_BATCH_SIZE, USER_AGENT
from pyzulip.exceptions import ZulipConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ZulipConfig:
    """Client configuration.

    Parameters
    ----------
    site : str
        Realm base URL (e.g. ``"https://chat.example.com"``). A trailing
        slash is stripped.
    email : str
        Account email (or bot email) used for basic auth.
    api_key : str
        API key used as the basic-auth password.
    user_agent : str
        ``User-Agent`` header sent with every request.
    request_timeout : float
        Total timeout in seconds for ordinary requests. Long-polling
        ``/events`` requests are not bounded by it.
    fetch_batch_size : int
        Number of messages a view asks for before the anchor on its
        initial fetch.
    event_queue_retry_delay : float
        Seconds to wait before polling the event queue again after a
        transport failure.
    api_trace_enabled : bool
        Log redacted request/response bodies at DEBUG level.
    """

    site: str
    email: str = ""
    api_key: str = ""
    user_agent: str = USER_AGENT
    request_timeout: float = 30.0
    fetch_batch_size: int = DEFAULT_FETCH_BATCH_SIZE
    event_queue_retry_delay: float = 1.0
    api_trace_enabled: bool = False

    def __post_init__(self) -> None:
        site = self.site.strip().rstrip("/")
        if not site:
            raise ZulipConfigError("site must be non-empty")
        if self.fetch_batch_size <= 0:
            raise ZulipConfigError(f"fetch_batch_size must be positive, got {self.fetch_batch_size}")
        object.__setattr__(self, "site", site)

    @classmethod
    def from_env(cls, **overrides: Any) -> ZulipConfig:
        """Create configuration from environment variables.

        Reads ``ZULIP_SITE``, ``ZULIP_EMAIL``, ``ZULIP_API_KEY`` and the
        optional ``ZULIP_*`` tuning variables. Explicit keyword arguments
        override environment values.

        Raises
        ------
        ZulipConfigError
            If no site is configured.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "ZULIP_SITE": "site",
            "ZULIP_EMAIL": "email",
            "ZULIP_API_KEY": "api_key",
            "ZULIP_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # numeric fields, handle separately
        timeout_env = env.get("ZULIP_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = float(timeout_env)

        batch_env = env.get("ZULIP_FETCH_BATCH_SIZE")
        if batch_env is not None and "fetch_batch_size" not in overrides:
            config_kwargs["fetch_batch_size"] = int(batch_env)

        retry_env = env.get("ZULIP_EVENT_QUEUE_RETRY_DELAY")
        if retry_env is not None and "event_queue_retry_delay" not in overrides:
            config_kwargs["event_queue_retry_delay"] = float(retry_env)

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(
                env.get("ZULIP_API_TRACE_ENABLED"),
                False,
            )

        config_kwargs.update(overrides)

        if "site" not in config_kwargs:
            raise ZulipConfigError("ZULIP_SITE is not set and no site was given")

        return cls(**config_kwargs)
