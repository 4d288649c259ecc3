"""Endpoint and timeout configuration for the peach-lib clients.

Service addresses resolve with the priority: explicit argument > environment
variable > built-in default. Timeouts live in one frozen dataclass so no
client hardcodes floats.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

__all__ = [
    "ServiceEndpoint",
    "NETWORK",
    "OLED",
    "STATS",
    "DYNDNS",
    "Timeouts",
    "CLIENT_TIMEOUTS",
    "resolve_url",
]


@dataclass(frozen=True)
class ServiceEndpoint:
    """Where a JSON-RPC microservice listens.

    Attributes:
        name: Service name used in log messages (e.g. "peach-network")
        env_var: Environment variable holding a "host:port" override
        default_address: Address used when neither argument nor env var is set
    """

    name: str
    env_var: str
    default_address: str


NETWORK = ServiceEndpoint("peach-network", "PEACH_NETWORK_SERVER", "127.0.0.1:5110")
OLED = ServiceEndpoint("peach-oled", "PEACH_OLED_SERVER", "127.0.0.1:5112")
STATS = ServiceEndpoint("peach-stats", "PEACH_STATS_SERVER", "127.0.0.1:5113")
# the one service that runs off the device, on the peach-vps
DYNDNS = ServiceEndpoint(
    "peach-dyndns-server", "PEACH_DYNDNS_SERVER", "http://dynserver.dyn.peachcloud.org"
)


def resolve_url(endpoint: ServiceEndpoint, address: str | None = None) -> str:
    """Resolve the HTTP URL for a service.

    Priority: address argument > ``endpoint.env_var`` > default address.
    Addresses without a scheme get ``http://``.

    Args:
        endpoint: The service to resolve
        address: Optional explicit "host:port" or URL

    Returns:
        URL string, e.g. "http://127.0.0.1:5110"
    """
    resolved = address or os.getenv(endpoint.env_var) or endpoint.default_address
    if "://" not in resolved:
        resolved = f"http://{resolved}"
    return resolved


@dataclass(frozen=True)
class Timeouts:
    """Timeout values (seconds) for the HTTP transport.

    Attributes:
        connect_timeout: TCP connection establishment timeout.
        request_timeout: Read, write and pool timeout for one JSON-RPC call.
    """

    connect_timeout: float = 10.0
    request_timeout: float = 30.0

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(self.request_timeout, connect=self.connect_timeout)


#: Default timeouts used by every client.
CLIENT_TIMEOUTS = Timeouts()
