"""Transport protocol and JSON-RPC 2.0 envelope handling.

Defines the structural interface every transport must satisfy, plus the
helpers that build request envelopes and unpack response envelopes. Using a
Protocol (structural subtyping) allows test fakes without inheritance.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

from peach_lib.jsonrpc.errors import JsonRpcError, MalformedResponseError

__all__ = [
    "JSONRPC_VERSION",
    "JsonParams",
    "RpcRequest",
    "Transport",
    "parse_response",
]

JSONRPC_VERSION = "2.0"

#: Positional (list) or named (dict) JSON-RPC parameters.
JsonParams: TypeAlias = list[Any] | dict[str, Any]


@runtime_checkable
class Transport(Protocol):
    """Structural interface for JSON-RPC transports.

    A transport performs one remote call per ``call`` and reports failures
    with the underlying error of the layer that failed.
    """

    def call(self, method: str, params: JsonParams) -> Any:
        """Invoke ``method`` on the remote service.

        Args:
            method: JSON-RPC method name
            params: JSON-compatible parameters

        Returns:
            The raw ``result`` member of the response

        Raises:
            httpx.HTTPError: If the request fails below the JSON-RPC layer
            JsonRpcError: If the peer returns an error or a malformed envelope
            ValueError: If the request cannot be serialized
        """
        ...


@dataclass(frozen=True)
class RpcRequest:
    """A single JSON-RPC call, built per invocation and then discarded."""

    method: str
    params: JsonParams

    def to_envelope(self, request_id: str) -> dict[str, Any]:
        """Return the JSON-RPC 2.0 request object for this call."""
        return {
            "jsonrpc": JSONRPC_VERSION,
            "id": request_id,
            "method": self.method,
            "params": self.params,
        }

    def to_json(self, request_id: str) -> bytes:
        """Serialize the request envelope.

        Raises:
            ValueError: If params hold NaN, infinite floats or values the JSON
                encoder does not know
        """
        try:
            text = json.dumps(self.to_envelope(request_id), allow_nan=False)
        except TypeError as exc:
            raise ValueError(f"Cannot encode params for {self.method}: {exc}") from exc
        return text.encode("utf-8")


def parse_response(body: bytes | str, request_id: str) -> Any:
    """Unpack a JSON-RPC response body and return its ``result``.

    Args:
        body: Raw response body
        request_id: The id sent with the request

    Returns:
        The ``result`` member (may be None)

    Raises:
        JsonRpcError: If the response carries an error object
        MalformedResponseError: If the body is not a response to this request
    """
    try:
        message = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise MalformedResponseError(f"Invalid JSON in response: {exc}") from exc

    if not isinstance(message, dict):
        raise MalformedResponseError(f"Response is not a JSON object: {message!r}")

    if "error" in message and message["error"] is not None:
        raise JsonRpcError.from_payload(message["error"])

    if message.get("id") != request_id:
        raise MalformedResponseError(
            f"Response id {message.get('id')!r} does not match request id {request_id!r}"
        )

    if "result" not in message:
        raise MalformedResponseError("Response has neither result nor error")

    return message["result"]
