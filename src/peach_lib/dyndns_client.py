"""Perform JSON-RPC calls to ``peach-dyndns-server``.

This is the one service that runs off the device (on the peach-vps). A
successful ``register_domain`` returns the TSIG key that authenticates later
nsupdate requests; storing it is up to the caller.
"""

from __future__ import annotations

import logging

from peach_lib.client import ServiceClient
from peach_lib.config import DYNDNS

logger = logging.getLogger(__name__)

__all__ = ["DynDnsClient"]


class DynDnsClient(ServiceClient):
    """Client for the dynamic DNS registration service."""

    endpoint = DYNDNS

    def register_domain(self, domain: str) -> str:
        """Register ``domain`` and return its TSIG key."""
        logger.info(f"Performing register_domain call for {domain}")
        return self._call("register_domain", str, domain=domain)

    def is_domain_available(self, domain: str) -> bool:
        """Whether ``domain`` can still be registered.

        The service answers with the text "true" or "false"; any other
        answer raises EncodingFailure.
        """
        return self._call_json("is_domain_available", bool, domain=domain)
