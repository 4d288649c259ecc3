"""peach-lib: JSON-RPC clients for the PeachCloud microservices.

This package provides:
- One client per service (network, OLED display, stats, dyndns)
- A single error type, PeachError, with three variants for transport,
  protocol and encoding failures
- The call dispatch helpers the clients are built on
- Testing utilities (fake transport, in-process JSON-RPC service)
"""

from peach_lib.config import CLIENT_TIMEOUTS, Timeouts
from peach_lib.dispatch import call, call_json
from peach_lib.dyndns_client import DynDnsClient
from peach_lib.error import (
    EncodingFailure,
    ErrorKind,
    PeachError,
    ProtocolFailure,
    TransportFailure,
)
from peach_lib.jsonrpc import HttpTransport, JsonRpcError, Transport
from peach_lib.network_client import NetworkClient
from peach_lib.oled_client import OledClient
from peach_lib.stats_client import StatsClient

__all__ = [
    # Errors
    "PeachError",
    "ErrorKind",
    "TransportFailure",
    "ProtocolFailure",
    "EncodingFailure",
    "JsonRpcError",
    # Dispatch
    "call",
    "call_json",
    "Transport",
    "HttpTransport",
    "Timeouts",
    "CLIENT_TIMEOUTS",
    # Clients
    "NetworkClient",
    "OledClient",
    "StatsClient",
    "DynDnsClient",
]
__version__ = "0.1.0"
