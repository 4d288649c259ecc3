"""Testing utilities for code that uses the peach-lib clients.

Provides a fake transport and an in-process JSON-RPC service for HTTP tests.
"""

from .fakes import FakeTransport, RecordedCall
from .server import JsonRpcMockServer

__all__ = ["FakeTransport", "RecordedCall", "JsonRpcMockServer"]
