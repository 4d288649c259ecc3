"""Tests for peach_lib.config: endpoint resolution and timeouts."""

from __future__ import annotations

import httpx
import pytest

from peach_lib.config import (
    CLIENT_TIMEOUTS,
    DYNDNS,
    NETWORK,
    OLED,
    STATS,
    Timeouts,
    resolve_url,
)


@pytest.mark.parametrize(
    "endpoint, expected",
    [
        (NETWORK, "http://127.0.0.1:5110"),
        (OLED, "http://127.0.0.1:5112"),
        (STATS, "http://127.0.0.1:5113"),
        (DYNDNS, "http://dynserver.dyn.peachcloud.org"),
    ],
)
def test_default_urls(endpoint, expected):
    """Without overrides each service resolves to its built-in address."""
    assert resolve_url(endpoint) == expected


def test_env_var_overrides_default(monkeypatch):
    """The service env var takes precedence over the default."""
    monkeypatch.setenv("PEACH_NETWORK_SERVER", "10.0.0.2:6000")
    assert resolve_url(NETWORK) == "http://10.0.0.2:6000"


def test_explicit_address_overrides_env(monkeypatch):
    """An explicit address beats the env var."""
    monkeypatch.setenv("PEACH_OLED_SERVER", "10.0.0.2:6000")
    assert resolve_url(OLED, "192.168.1.9:5112") == "http://192.168.1.9:5112"


def test_empty_env_var_falls_back_to_default(monkeypatch):
    """An empty env var counts as unset."""
    monkeypatch.setenv("PEACH_STATS_SERVER", "")
    assert resolve_url(STATS) == "http://127.0.0.1:5113"


def test_scheme_is_kept_when_present():
    """URLs that already carry a scheme are used as given."""
    assert resolve_url(NETWORK, "https://peach.local:5110") == "https://peach.local:5110"


def test_endpoint_names():
    """Endpoints carry the service names used in log messages."""
    assert [e.name for e in (NETWORK, OLED, STATS, DYNDNS)] == [
        "peach-network",
        "peach-oled",
        "peach-stats",
        "peach-dyndns-server",
    ]


def test_default_timeouts():
    """CLIENT_TIMEOUTS should exist with expected defaults."""
    assert CLIENT_TIMEOUTS.connect_timeout == 10.0
    assert CLIENT_TIMEOUTS.request_timeout == 30.0


def test_timeouts_is_frozen():
    """Timeouts dataclass should be frozen (immutable)."""
    with pytest.raises((AttributeError, TypeError)):
        CLIENT_TIMEOUTS.connect_timeout = 99.0  # type: ignore[misc]


def test_timeouts_to_httpx():
    """Timeouts convert to an equivalent httpx.Timeout."""
    timeout = Timeouts(connect_timeout=2.0, request_timeout=5.0).to_httpx()
    assert isinstance(timeout, httpx.Timeout)
    assert timeout.connect == 2.0
    assert timeout.read == 5.0
    assert timeout.write == 5.0
