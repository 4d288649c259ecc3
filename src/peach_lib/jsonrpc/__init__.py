"""JSON-RPC 2.0 client plumbing: error types, envelopes and the HTTP transport."""

from peach_lib.jsonrpc.errors import (
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    JsonRpcError,
    MalformedResponseError,
    MethodNotFoundError,
    ParseError,
)
from peach_lib.jsonrpc.protocol import JsonParams, RpcRequest, Transport, parse_response
from peach_lib.jsonrpc.transport import HttpTransport

__all__ = [
    # Errors
    "JsonRpcError",
    "ParseError",
    "InvalidRequestError",
    "MethodNotFoundError",
    "InvalidParamsError",
    "InternalError",
    "MalformedResponseError",
    # Protocol
    "JsonParams",
    "RpcRequest",
    "Transport",
    "parse_response",
    # Transport
    "HttpTransport",
]
