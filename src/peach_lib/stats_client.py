"""Perform JSON-RPC calls to the ``peach-stats`` microservice.

peach-stats returns its structured results as JSON text, so those methods go
through ``call_json`` and come back as pydantic models.
"""

from __future__ import annotations

from peach_lib.client import ServiceClient
from peach_lib.config import STATS
from peach_lib.models import CpuStatPercentages, DiskUsage, LoadAverage, MemStat

__all__ = ["StatsClient"]


class StatsClient(ServiceClient):
    """Client for the ``peach-stats`` system statistics service."""

    endpoint = STATS

    def cpu_stats_percent(self) -> CpuStatPercentages:
        """CPU time split (user, system, idle, nice) as percentages."""
        return self._call_json("cpu_stats_percent", CpuStatPercentages)

    def disk_usage(self) -> list[DiskUsage]:
        """Usage of each mounted filesystem."""
        return self._call_json("disk_usage", list[DiskUsage])

    def load_average(self) -> LoadAverage:
        return self._call_json("load_average", LoadAverage)

    def mem_stats(self) -> MemStat:
        return self._call_json("mem_stats", MemStat)

    def ping(self) -> str:
        """Check that peach-stats is running."""
        return self._call("ping", str)

    def uptime(self) -> str:
        """System uptime in seconds, as text."""
        return self._call("uptime", str)
