"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest

from peach_lib.network_client import NetworkClient
from peach_lib.testing import FakeTransport, JsonRpcMockServer


@pytest.fixture
def transport() -> FakeTransport:
    """Returns an empty FakeTransport; tests fill in ``results``."""
    return FakeTransport()


@pytest.fixture
def server() -> JsonRpcMockServer:
    """Returns an in-process JSON-RPC service with no methods yet."""
    return JsonRpcMockServer()


@pytest.fixture
def network(server: JsonRpcMockServer) -> Iterator[NetworkClient]:
    """NetworkClient whose HTTP transport is routed to ``server``."""
    with NetworkClient.open(http_client=server.client()) as client:
        yield client


@pytest.fixture(autouse=True)
def clear_service_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer env vars from changing resolved endpoints."""
    for name in (
        "PEACH_NETWORK_SERVER",
        "PEACH_OLED_SERVER",
        "PEACH_STATS_SERVER",
        "PEACH_DYNDNS_SERVER",
    ):
        monkeypatch.delenv(name, raising=False)
