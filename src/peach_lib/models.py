"""Pydantic models for structured results of the peach microservices.

These describe the JSON documents returned (as text) by peach-network and
peach-stats. The services own the schemas; the models only need to accept
what they send, so unknown keys are ignored and nothing is coerced.
"""

from pydantic import BaseModel


class Scan(BaseModel):
    """An access point in range, from ``available_networks``.

    Attributes:
        protocol: Security protocol (e.g. "WPA2")
        frequency: Channel frequency in MHz
        signal_level: Signal level in dBm
        ssid: Network name
    """

    protocol: str
    frequency: str
    signal_level: str
    ssid: str


class Networks(BaseModel):
    """A network with credentials saved in ``wpa_supplicant.conf``."""

    ssid: str


class Traffic(BaseModel):
    """Bytes received and transmitted on an interface.

    Attributes:
        received: Total bytes received
        transmitted: Total bytes transmitted
        rx_unit: Display unit for ``received``, if the service set one
        tx_unit: Display unit for ``transmitted``, if the service set one
    """

    received: int
    transmitted: int
    rx_unit: str | None = None
    tx_unit: str | None = None


class CpuStatPercentages(BaseModel):
    user: float
    system: float
    idle: float
    nice: float


class DiskUsage(BaseModel):
    """Usage of one mounted filesystem, as reported by ``df``.

    Attributes:
        filesystem: Device name, absent for some virtual filesystems
        one_k_blocks: Size in 1K blocks
        one_k_blocks_used: Used 1K blocks
        one_k_blocks_free: Free 1K blocks
        used_percentage: Percentage used (0-100)
        mountpoint: Mount location
    """

    filesystem: str | None = None
    one_k_blocks: int
    one_k_blocks_used: int
    one_k_blocks_free: int
    used_percentage: int
    mountpoint: str


class LoadAverage(BaseModel):
    """System load averages over one, five and fifteen minutes."""

    one: float
    five: float
    fifteen: float


class MemStat(BaseModel):
    """Memory totals in kilobytes."""

    total: int
    free: int
    used: int
