"""JSON-RPC 2.0 over HTTP.

``HttpTransport`` satisfies the ``Transport`` protocol with a synchronous
``httpx.Client``: one POST per call, no retries. Timeouts come from the
client configuration; nothing here waits or backs off on its own.
"""

from __future__ import annotations

import logging
import uuid
from types import TracebackType
from typing import Any

import httpx

from peach_lib.config import CLIENT_TIMEOUTS, Timeouts
from peach_lib.jsonrpc.protocol import JsonParams, RpcRequest, parse_response

logger = logging.getLogger(__name__)

__all__ = ["HttpTransport"]


class HttpTransport:
    """Transport implementation for JSON-RPC over HTTP.

    Wraps an ``httpx.Client`` bound to one service URL. The client may be
    supplied (e.g. with an ``httpx.MockTransport`` in tests); otherwise one is
    created and owned by this transport.
    """

    def __init__(
        self,
        url: str,
        *,
        timeouts: Timeouts = CLIENT_TIMEOUTS,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the HTTP transport.

        Args:
            url: Service endpoint URL, e.g. "http://127.0.0.1:5110"
            timeouts: Timeouts for a newly created client
            client: Optional pre-configured client; closed by ``close()`` too

        Raises:
            httpx.InvalidURL: If ``url`` cannot be parsed
        """
        self.url = httpx.URL(url)
        logger.debug(f"Creating HTTP transport handle on {self.url}")
        self._client = client or httpx.Client(timeout=timeouts.to_httpx())

    def call(self, method: str, params: JsonParams) -> Any:
        """Send one JSON-RPC request and return the raw result.

        Args:
            method: JSON-RPC method name
            params: JSON-compatible parameters

        Returns:
            The ``result`` member of the response

        Raises:
            httpx.HTTPError: On connection failure, timeout or non-2xx status
            JsonRpcError: If the response carries an error or is malformed
            ValueError: If the params cannot be serialized
        """
        request_id = str(uuid.uuid4())
        body = RpcRequest(method, params).to_json(request_id)

        logger.debug(f"Sending {method} request (id={request_id}) to {self.url}")
        response = self._client.post(
            self.url,
            content=body,
            headers={"Content-Type": "application/json"},
        )
        response.raise_for_status()

        return parse_response(response.content, request_id)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"HttpTransport({str(self.url)!r})"
