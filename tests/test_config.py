from __future__ import annotations

import pytest

from pyzulip.config import ZulipConfig
from pyzulip.exceptions import ZulipConfigError


def test_site_trailing_slash_stripped() -> None:
    config = ZulipConfig(site="https://chat.example.com/")
    assert config.site == "https://chat.example.com"


def test_empty_site_rejected() -> None:
    with pytest.raises(ZulipConfigError):
        ZulipConfig(site="  ")


def test_non_positive_batch_size_rejected() -> None:
    with pytest.raises(ZulipConfigError):
        ZulipConfig(site="https://chat.example.com", fetch_batch_size=0)


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZULIP_SITE", "https://chat.example.com")
    monkeypatch.setenv("ZULIP_EMAIL", "bot@example.com")
    monkeypatch.setenv("ZULIP_API_KEY", "abc123")
    monkeypatch.setenv("ZULIP_FETCH_BATCH_SIZE", "40")
    monkeypatch.setenv("ZULIP_API_TRACE_ENABLED", "yes")

    config = ZulipConfig.from_env()

    assert config.email == "bot@example.com"
    assert config.api_key == "abc123"
    assert config.fetch_batch_size == 40
    assert config.api_trace_enabled is True


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZULIP_SITE", "https://chat.example.com")
    monkeypatch.setenv("ZULIP_FETCH_BATCH_SIZE", "40")

    config = ZulipConfig.from_env(fetch_batch_size=5, site="https://other.example.com")

    assert config.fetch_batch_size == 5
    assert config.site == "https://other.example.com"


def test_from_env_without_site_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ZULIP_SITE", raising=False)

    with pytest.raises(ZulipConfigError):
        ZulipConfig.from_env()
