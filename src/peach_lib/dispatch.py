"""Call dispatch: one remote call, every failure normalized to ``PeachError``.

``call`` encodes the parameters, performs exactly one ``transport.call`` and
decodes the raw result into the requested type. ``call_json`` does the same
for services whose result is a string holding a JSON document.

Decoding uses a pydantic ``TypeAdapter`` in strict mode, attempted once: a
result of the wrong shape is an ``EncodingFailure``, never coerced and never
replaced by a default.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from peach_lib.error import EncodingFailure, PeachError
from peach_lib.jsonrpc.errors import JsonRpcError
from peach_lib.jsonrpc.protocol import JsonParams, RpcRequest, Transport

logger = logging.getLogger(__name__)

__all__ = ["call", "call_json", "encode_params", "decode_result"]

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def encode_params(params: Any) -> JsonParams:
    """Convert call parameters into JSON-compatible values.

    Raises:
        PydanticSerializationError: If a value has no JSON representation
        ValueError: If the encoded params are neither a list nor a dict
    """
    encoded = to_jsonable_python(params)
    if not isinstance(encoded, (list, dict)):
        raise ValueError(f"JSON-RPC params must be a list or object, got {encoded!r}")
    return encoded


def decode_result(raw: Any, result_type: type[T]) -> T:
    """Validate a raw JSON value against ``result_type`` without coercion.

    Raises:
        pydantic.ValidationError: If ``raw`` does not match
    """
    return _adapter(result_type).validate_python(raw, strict=True)


def _invoke(transport: Transport, request: RpcRequest) -> Any:
    logger.debug(f"Calling {request.method} on {transport!r}")
    try:
        return transport.call(request.method, request.params)
    except (httpx.HTTPError, JsonRpcError, ValueError) as exc:
        raise PeachError.from_exception(exc, method=request.method) from exc


def _request(method: str, params: Any) -> RpcRequest:
    try:
        return RpcRequest(method, encode_params(params))
    except ValueError as exc:
        raise EncodingFailure(exc, method=method) from exc


def call(
    transport: Transport,
    method: str,
    params: Any,
    result_type: type[T],
) -> T:
    """Perform one JSON-RPC call and decode its result.

    Args:
        transport: Handle bound to the target service
        method: JSON-RPC method name
        params: Parameters as a list or dict (pydantic-serializable values)
        result_type: Expected type of the ``result`` member

    Returns:
        The decoded result

    Raises:
        TransportFailure: If the HTTP request fails (no retry)
        ProtocolFailure: If the service reports a JSON-RPC error
        EncodingFailure: If params cannot be encoded or the result mismatches

    Example:
        with HttpTransport("http://127.0.0.1:5110") as transport:
            ip = call(transport, "ip", {"iface": "wlan0"}, str)
    """
    raw = _invoke(transport, _request(method, params))
    try:
        return decode_result(raw, result_type)
    except ValueError as exc:
        raise EncodingFailure(exc, method=method) from exc


def call_json(
    transport: Transport,
    method: str,
    params: Any,
    result_type: type[T],
) -> T:
    """Perform one JSON-RPC call whose result is JSON text, and decode it.

    The result must be a string; its content is parsed and validated against
    ``result_type``. Failures are raised as for ``call``.

    Example:
        traffic = call_json(transport, "traffic", {"iface": "wlan0"}, Traffic)
    """
    raw = _invoke(transport, _request(method, params))
    try:
        text = decode_result(raw, str)
        return _adapter(result_type).validate_json(text, strict=True)
    except ValueError as exc:
        raise EncodingFailure(exc, method=method) from exc
