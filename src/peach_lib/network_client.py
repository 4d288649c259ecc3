"""Perform JSON-RPC calls to the ``peach-network`` microservice.

Each remote method has a matching ``NetworkClient`` method that fixes the
method name and parameter names. The helpers at the end (``saved_ap``,
``disable``, ``forget``, ``update``) bundle several calls; the first failure
propagates and the remaining calls are not made.
"""

from __future__ import annotations

import logging

from peach_lib.client import ServiceClient
from peach_lib.config import NETWORK
from peach_lib.models import Networks, Scan, Traffic

logger = logging.getLogger(__name__)

__all__ = ["NetworkClient"]


class NetworkClient(ServiceClient):
    """Client for the ``peach-network`` service (WiFi client and access point)."""

    endpoint = NETWORK

    def activate_ap(self) -> str:
        """Activate the access point."""
        return self._call("activate_ap", str)

    def activate_client(self) -> str:
        """Activate the wireless client (wlan0)."""
        return self._call("activate_client", str)

    def add(self, ssid: str, password: str) -> str:
        """Add credentials for an access point.

        Args:
            ssid: SSID of the access point
            password: Password for the access point
        """
        return self._call("add", str, ssid=ssid, **{"pass": password})

    def available_networks(self, iface: str) -> list[Scan]:
        """List the networks in range of ``iface``."""
        return self._call_json("available_networks", list[Scan], iface=iface)

    def connect(self, network_id: str, iface: str) -> str:
        """Disable other networks and connect ``iface`` to ``network_id``."""
        return self._call("connect", str, id=network_id, iface=iface)

    def delete(self, network_id: str, iface: str) -> str:
        """Delete saved credentials for a network from the wpa_supplicant config."""
        return self._call("delete", str, id=network_id, iface=iface)

    def disable_network(self, network_id: str, iface: str) -> str:
        """Disable the network identified by ``network_id`` on ``iface``."""
        return self._call("disable", str, id=network_id, iface=iface)

    def id(self, iface: str, ssid: str) -> str:
        """Return the wpa_supplicant network ID for ``ssid`` on ``iface``."""
        return self._call("id", str, iface=iface, ssid=ssid)

    def ip(self, iface: str) -> str:
        """Return the IP address of ``iface``."""
        return self._call("ip", str, iface=iface)

    def ping(self) -> str:
        """Check that peach-network is running."""
        return self._call("ping", str)

    def reconfigure(self) -> str:
        """Make wpa_supplicant reread its config."""
        return self._call("reconfigure", str)

    def rssi(self, iface: str) -> str:
        """Average signal strength (dBm) for ``iface``."""
        return self._call("rssi", str, iface=iface)

    def rssi_percent(self, iface: str) -> str:
        """Average signal quality (%) for ``iface``."""
        return self._call("rssi_percent", str, iface=iface)

    def save(self) -> str:
        """Save network configuration updates to file."""
        return self._call("save", str)

    def saved_networks(self) -> list[Networks]:
        """List the networks saved in ``wpa_supplicant.conf``."""
        return self._call_json("saved_networks", list[Networks])

    def ssid(self, iface: str) -> str:
        """SSID of the network ``iface`` is connected to."""
        return self._call("ssid", str, iface=iface)

    def state(self, iface: str) -> str:
        return self._call("state", str, iface=iface)

    def status(self, iface: str) -> str:
        return self._call("status", str, iface=iface)

    def traffic(self, iface: str) -> Traffic:
        """Network traffic counters for ``iface``."""
        return self._call_json("traffic", Traffic, iface=iface)

    def saved_ap(self, ssid: str) -> bool:
        """Whether credentials for ``ssid`` are already saved.

        Returns:
            True if any saved network has this SSID
        """
        return any(network.ssid == ssid for network in self.saved_networks())

    def disable(self, iface: str, ssid: str) -> None:
        """Look up the network ID for ``ssid`` and disable that network."""
        logger.info("Performing id call to peach-network microservice")
        network_id = self.id(iface, ssid)
        logger.info("Performing disable call to peach-network microservice")
        self.disable_network(network_id, iface)

    def forget(self, iface: str, ssid: str) -> None:
        """Delete the saved credentials for ``ssid`` and save the config."""
        logger.info("Performing id call to peach-network microservice")
        network_id = self.id(iface, ssid)
        logger.info("Performing delete call to peach-network microservice")
        self.delete(network_id, iface)
        logger.info("Performing save call to peach-network microservice")
        self.save()

    def update(self, iface: str, ssid: str, password: str) -> None:
        """Replace the saved password for ``ssid``.

        Deletes the old credentials, saves, adds the new credentials and
        reconfigures wpa_supplicant so the change takes effect.
        """
        logger.info("Performing id call to peach-network microservice")
        network_id = self.id(iface, ssid)
        logger.info("Performing delete call to peach-network microservice")
        self.delete(network_id, iface)
        logger.info("Performing save call to peach-network microservice")
        self.save()
        logger.info("Performing add call to peach-network microservice")
        self.add(ssid, password)
        logger.info("Performing reconfigure call to peach-network microservice")
        self.reconfigure()
