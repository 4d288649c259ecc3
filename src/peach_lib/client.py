"""Base class for the per-service JSON-RPC client facades.

A ``ServiceClient`` owns one transport bound to one microservice. Subclasses
add one method per remote operation, each a single delegation to the dispatch
helpers; errors pass through unchanged.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, ClassVar, Self, TypeVar

import httpx

from peach_lib.config import CLIENT_TIMEOUTS, ServiceEndpoint, Timeouts, resolve_url
from peach_lib.dispatch import call, call_json
from peach_lib.jsonrpc.protocol import Transport
from peach_lib.jsonrpc.transport import HttpTransport

logger = logging.getLogger(__name__)

__all__ = ["ServiceClient"]

T = TypeVar("T")


class ServiceClient:
    """JSON-RPC client for one peach microservice.

    Example:
        with NetworkClient.open() as network:
            print(network.ip("wlan0"))
    """

    endpoint: ClassVar[ServiceEndpoint]

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    @classmethod
    def open(
        cls,
        address: str | None = None,
        *,
        timeouts: Timeouts = CLIENT_TIMEOUTS,
        http_client: httpx.Client | None = None,
    ) -> Self:
        """Create a client with an HTTP transport for this service.

        Args:
            address: "host:port" or URL; defaults to the service env var,
                then the built-in address
            timeouts: HTTP timeouts for the transport
            http_client: Optional pre-configured ``httpx.Client``

        Returns:
            Client bound to the resolved endpoint
        """
        url = resolve_url(cls.endpoint, address)
        transport = HttpTransport(url, timeouts=timeouts, client=http_client)
        logger.info(f"Creating client for {cls.endpoint.name} service")
        return cls(transport)

    def _call(self, method: str, result_type: type[T], **params: Any) -> T:
        return call(self.transport, method, params, result_type)

    def _call_json(self, method: str, result_type: type[T], **params: Any) -> T:
        return call_json(self.transport, method, params, result_type)

    def close(self) -> None:
        """Close the transport if it holds resources."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.transport!r})"
