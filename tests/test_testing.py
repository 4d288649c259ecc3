"""Tests for peach_lib.testing fakes (FakeTransport, JsonRpcMockServer).

These tests verify the test utilities work correctly.
"""

from __future__ import annotations

import httpx
import pytest

from peach_lib.jsonrpc import HttpTransport, JsonRpcError, MethodNotFoundError
from peach_lib.network_client import NetworkClient
from peach_lib.testing import FakeTransport, JsonRpcMockServer, RecordedCall


def test_fake_transport_defaults():
    """FakeTransport starts with no results and no calls."""
    transport = FakeTransport()
    assert transport.results == {}
    assert transport.calls == []
    assert transport.closed is False


def test_fake_transport_records_calls():
    """Calls are recorded in order with their params."""
    transport = FakeTransport({"ping": "success", "ip": "10.0.0.1"})
    transport.call("ping", {})
    transport.call("ip", {"iface": "wlan0"})
    assert transport.calls == [
        RecordedCall("ping", {}),
        RecordedCall("ip", {"iface": "wlan0"}),
    ]
    assert transport.methods == ["ping", "ip"]


def test_recorded_call_with_dict_params_compares_by_value():
    """RecordedCall compares by value and is not hashable."""
    recorded = RecordedCall("ip", {"iface": "wlan0"})
    assert recorded == RecordedCall("ip", {"iface": "wlan0"})
    assert RecordedCall.__hash__ is None


def test_fake_transport_unknown_method():
    """Unknown methods raise MethodNotFoundError like a real service."""
    with pytest.raises(MethodNotFoundError):
        FakeTransport().call("nonexistent_method", [])


def test_fake_transport_raises_configured_exception():
    """Exception instances in results are raised."""
    error = JsonRpcError(-32000, "boom")
    with pytest.raises(JsonRpcError) as exc_info:
        FakeTransport({"save": error}).call("save", {})
    assert exc_info.value is error


def test_client_close_closes_fake_transport():
    """Closing a client closes its transport."""
    transport = FakeTransport()
    with NetworkClient(transport):
        pass
    assert transport.closed


def test_mock_server_handler_receives_params():
    """Callable methods get the request params."""
    server = JsonRpcMockServer({"echo": lambda params: params["text"]})
    with HttpTransport("http://127.0.0.1:5112", client=server.client()) as transport:
        assert transport.call("echo", {"text": "hi"}) == "hi"


def test_mock_server_error_reply():
    """JsonRpcMockServer.Error becomes an error object with data."""

    def fail(params):
        raise JsonRpcMockServer.Error(-32000, "Failed", data="wlan9")

    server = JsonRpcMockServer({"ip": fail})
    with HttpTransport("http://127.0.0.1:5110", client=server.client()) as transport:
        with pytest.raises(JsonRpcError) as exc_info:
            transport.call("ip", {"iface": "wlan9"})
    assert exc_info.value.code == -32000
    assert exc_info.value.data == "wlan9"


def test_mock_server_transport_is_httpx_mock_transport():
    """transport() exposes the handler as an httpx.MockTransport."""
    assert isinstance(JsonRpcMockServer().transport(), httpx.MockTransport)
