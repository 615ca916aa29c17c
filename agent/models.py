from dataclasses import dataclass, asdict
from typing import Tuple


@dataclass(frozen=True)
class MemorySnapshot:
    total_mb: float
    used_mb: float
    free_mb: float
    percent_used: float


@dataclass(frozen=True)
class DiskSnapshot:
    drive: str        # e.g. "C:" or "/home"
    size_gb: float
    used_gb: float
    free_gb: float
    percent_used: float


@dataclass(frozen=True)
class Sample:
    """One run's readings. Built once, serialized, then dropped."""

    timestamp: str
    host: str
    cpu_percent: float
    memory: MemorySnapshot
    disks: Tuple[DiskSnapshot, ...]
    net_mbps: float

    def to_payload(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "host": self.host,
            "cpu_percent": self.cpu_percent,
            "memory": asdict(self.memory),
            "disks": [asdict(d) for d in self.disks],
            "net_mbps": self.net_mbps,
        }
