"""
Records returned by the server's administrative RPC methods.

The server encodes its structs with their Go field names, so records are
built from PascalCase keys. Missing keys fall back to defaults.
"""

from dataclasses import dataclass, field
from ipaddress import IPv4Address
from typing import Any


def _ip_or_none(value: Any) -> IPv4Address | None:
    if not value:
        return None
    return IPv4Address(value)


@dataclass
class PoolStat:
    """Lease usage of a single address pool."""

    network_name: str = ""
    subnet: str = ""
    start: IPv4Address | None = None
    end: IPv4Address | None = None
    registered: bool = False

    # Lease counts
    total: int = 0
    active: int = 0
    claimed: int = 0
    abandoned: int = 0
    free: int = 0

    @property
    def used(self) -> int:
        """Leases not available for handing out."""
        return self.active + self.claimed + self.abandoned

    @property
    def utilization(self) -> float:
        """Fraction of the pool in use (0.0 for an empty pool)."""
        if self.total == 0:
            return 0.0
        return self.used / self.total

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PoolStat":
        return cls(
            network_name=data.get("NetworkName", ""),
            subnet=data.get("Subnet", ""),
            start=_ip_or_none(data.get("Start")),
            end=_ip_or_none(data.get("End")),
            registered=bool(data.get("Registered", False)),
            total=int(data.get("Total", 0)),
            active=int(data.get("Active", 0)),
            claimed=int(data.get("Claimed", 0)),
            abandoned=int(data.get("Abandoned", 0)),
            free=int(data.get("Free", 0)),
        )


@dataclass
class MemStats:
    """Memory statistics of the server process (in bytes)."""

    alloc: int = 0
    total_alloc: int = 0
    sys: int = 0
    heap_alloc: int = 0
    heap_sys: int = 0
    heap_objects: int = 0
    num_gc: int = 0

    @property
    def alloc_mb(self) -> float:
        """Allocated heap memory in megabytes."""
        return self.alloc / (1024 * 1024)

    @property
    def sys_mb(self) -> float:
        """Memory obtained from the OS in megabytes."""
        return self.sys / (1024 * 1024)

    @property
    def heap_alloc_mb(self) -> float:
        return self.heap_alloc / (1024 * 1024)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MemStats":
        return cls(
            alloc=int(data.get("Alloc", 0)),
            total_alloc=int(data.get("TotalAlloc", 0)),
            sys=int(data.get("Sys", 0)),
            heap_alloc=int(data.get("HeapAlloc", 0)),
            heap_sys=int(data.get("HeapSys", 0)),
            heap_objects=int(data.get("HeapObjects", 0)),
            num_gc=int(data.get("NumGC", 0)),
        )


@dataclass
class StatusResp:
    """Process status of a running server."""

    go_routines: int = 0
    memory: MemStats = field(default_factory=MemStats)
    uptime: float = 0.0  # seconds

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "StatusResp":
        data = data or {}
        return cls(
            go_routines=int(data.get("GoRoutines", 0)),
            memory=MemStats.from_dict(data.get("Memory") or {}),
            uptime=float(data.get("Uptime", 0.0)),
        )
