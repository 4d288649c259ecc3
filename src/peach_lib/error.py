"""Unified error type for the network, OLED, stats and dyndns JSON-RPC clients.

Every failure a remote call can produce falls into exactly one of three
variants, each wrapping the original error from its layer:

- TransportFailure: HTTP-level failure (``httpx.HTTPError``)
- ProtocolFailure: JSON-RPC error object or malformed envelope (``JsonRpcError``)
- EncodingFailure: request/response (de)serialization failure (``ValueError``,
  which covers ``pydantic.ValidationError`` and ``PydanticSerializationError``)

Callers either catch ``PeachError`` and let it propagate, or match on the
variant:

    try:
        client.ip("wlan0")
    except PeachError as err:
        match err:
            case TransportFailure(source=exc):
                print(f"peach-network unreachable: {exc}")
            case ProtocolFailure() | EncodingFailure():
                print(f"bad request: {err}")
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

import httpx

from peach_lib.jsonrpc.errors import JsonRpcError

__all__ = [
    "ErrorKind",
    "PeachError",
    "TransportFailure",
    "ProtocolFailure",
    "EncodingFailure",
]


class ErrorKind(Enum):
    """Discriminator for the three failure domains."""

    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    ENCODING = "encoding"


class PeachError(Exception):
    """Base class for every error raised by a peach-lib client call.

    Not instantiable itself: construct one of the three variants, or use
    ``PeachError.from_exception`` to pick the variant for an underlying error.

    Attributes:
        source: The original error, kept as-is for diagnostics.
        method: JSON-RPC method name of the failed call, when known.
    """

    kind: ClassVar[ErrorKind]
    description: ClassVar[str]
    accepts: ClassVar[tuple[type[BaseException], ...]]

    __match_args__ = ("source",)

    def __init__(self, source: BaseException, method: str | None = None) -> None:
        if type(self) is PeachError:
            raise TypeError(
                "PeachError is abstract; use TransportFailure, ProtocolFailure "
                "or EncodingFailure"
            )
        if not isinstance(source, self.accepts):
            raise TypeError(
                f"{type(self).__name__} cannot wrap {type(source).__name__}"
            )
        super().__init__(source)
        self.source = source
        self.method = method

    @classmethod
    def from_exception(
        cls, exc: BaseException, method: str | None = None
    ) -> PeachError:
        """Wrap an underlying error in the matching variant.

        Args:
            exc: An ``httpx.HTTPError``, ``JsonRpcError`` or ``ValueError``
            method: Optional JSON-RPC method name for context

        Returns:
            The variant whose domain covers ``exc``

        Raises:
            TypeError: If ``exc`` belongs to none of the three domains
        """
        if isinstance(exc, PeachError):
            return exc
        for variant in (TransportFailure, ProtocolFailure, EncodingFailure):
            if isinstance(exc, variant.accepts):
                return variant(exc, method=method)
        raise TypeError(f"No PeachError variant for {type(exc).__name__}: {exc}")

    def __str__(self) -> str:
        if self.method:
            return f"{self.description} in {self.method!r}: {self.source}"
        return f"{self.description}: {self.source}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r})"


class TransportFailure(PeachError):
    """Connection refused, timeout, non-2xx status or malformed HTTP."""

    kind = ErrorKind.TRANSPORT
    description = "JSON-RPC HTTP transport error"
    accepts = (httpx.HTTPError,)


class ProtocolFailure(PeachError):
    """Error object returned by the service, or an unreadable envelope."""

    kind = ErrorKind.PROTOCOL
    description = "JSON-RPC core error"
    accepts = (JsonRpcError,)

    source: JsonRpcError

    @property
    def code(self) -> int:
        """JSON-RPC error code of the wrapped error."""
        return self.source.code


class EncodingFailure(PeachError):
    """Parameters could not be encoded, or the result did not match its type."""

    kind = ErrorKind.ENCODING
    description = "JSON serialization error"
    accepts = (ValueError,)
