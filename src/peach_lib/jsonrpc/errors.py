"""JSON-RPC error types for the client side of the protocol.

Provides typed exceptions that map to JSON-RPC 2.0 error codes. The server's
error object is turned into one of these by ``JsonRpcError.from_payload``.
"""

from __future__ import annotations

from typing import Any, ClassVar

__all__ = [
    "JsonRpcError",
    "ParseError",
    "InvalidRequestError",
    "MethodNotFoundError",
    "InvalidParamsError",
    "InternalError",
    "MalformedResponseError",
]


class JsonRpcError(RuntimeError):
    """Error reported by a JSON-RPC peer.

    Instances of this base class carry server-defined application codes;
    the reserved codes have their own subclasses.

    Attributes:
        code: JSON-RPC error code
        message: Short description from the error object
        data: Optional ``data`` member of the error object
    """

    json_rpc_code: ClassVar[int | None] = None

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(f"{message} (code {code})")
        self.code = code
        self.message = message
        self.data = data

    @classmethod
    def from_payload(cls, error: Any) -> JsonRpcError:
        """Build the error matching a response's ``error`` member.

        Args:
            error: The ``error`` value of a JSON-RPC response

        Returns:
            A code-specific subclass for reserved codes, JsonRpcError otherwise

        Raises:
            MalformedResponseError: If ``error`` is not a valid error object
        """
        if not isinstance(error, dict):
            raise MalformedResponseError(f"error member is not an object: {error!r}")
        code = error.get("code")
        message = error.get("message")
        if not isinstance(code, int) or isinstance(code, bool):
            raise MalformedResponseError(f"error object has no integer code: {error!r}")
        if not isinstance(message, str):
            raise MalformedResponseError(f"error object has no string message: {error!r}")
        error_type = _BY_CODE.get(code, JsonRpcError)
        return error_type(code, message, error.get("data"))


class ParseError(JsonRpcError):
    """The server could not parse the request JSON."""

    json_rpc_code = -32700


class InvalidRequestError(JsonRpcError):
    """The request was not a valid JSON-RPC request object."""

    json_rpc_code = -32600


class MethodNotFoundError(JsonRpcError):
    """Raised when a JSON-RPC method is not recognized.

    Maps to JSON-RPC error code -32601 (Method not found).
    """

    json_rpc_code = -32601


class InvalidParamsError(JsonRpcError):
    """The method exists but rejected the parameters."""

    json_rpc_code = -32602


class InternalError(JsonRpcError):
    json_rpc_code = -32603


class MalformedResponseError(JsonRpcError):
    """The response body is not a usable JSON-RPC response envelope.

    Raised on the client side, so it reuses the parse error code.
    """

    json_rpc_code = -32700

    def __init__(self, message: str, data: Any = None) -> None:
        super().__init__(-32700, message, data)


_BY_CODE: dict[int, type[JsonRpcError]] = {
    error_type.json_rpc_code: error_type
    for error_type in (
        ParseError,
        InvalidRequestError,
        MethodNotFoundError,
        InvalidParamsError,
        InternalError,
    )
}
