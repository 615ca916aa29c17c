"""
Shared fixtures for the snapshot agent test suite.
"""

from collections import namedtuple

import pytest

from agent.config import AgentConfig
from agent.models import DiskSnapshot, MemorySnapshot, Sample

# Stand-ins for the psutil result tuples, with only the fields the agent reads
svmem = namedtuple("svmem", "total available")
sdiskpart = namedtuple("sdiskpart", "device mountpoint fstype opts")
sdiskusage = namedtuple("sdiskusage", "total used free percent")
snetio = namedtuple("snetio", "bytes_sent bytes_recv")

GB = 1024 ** 3


@pytest.fixture
def csv_path(tmp_path):
    return str(tmp_path / "metrics.csv")


@pytest.fixture
def config(csv_path):
    """Default thresholds, zero sampling wait, output in a temp dir."""
    return AgentConfig(output_csv=csv_path, sample_interval=0)


@pytest.fixture
def make_sample():
    """Factory for samples; override any reading by keyword."""

    def _make(cpu=10.0, mem_pct=40.0, disks=None, net=0.5, timestamp="2026-10-18T09:30:00"):
        if disks is None:
            disks = (
                DiskSnapshot(drive="C:", size_gb=100.0, used_gb=90.0, free_gb=10.0, percent_used=90.0),
                DiskSnapshot(drive="D:", size_gb=50.0, used_gb=48.0, free_gb=2.0, percent_used=96.0),
            )
        memory = MemorySnapshot(
            total_mb=8000.0,
            used_mb=round(8000.0 * mem_pct / 100, 2),
            free_mb=round(8000.0 - 8000.0 * mem_pct / 100, 2),
            percent_used=mem_pct,
        )
        return Sample(
            timestamp=timestamp,
            host="testhost",
            cpu_percent=cpu,
            memory=memory,
            disks=tuple(disks),
            net_mbps=net,
        )

    return _make


class FakeClock:
    """Replaces the ``time`` module inside agent.collectors."""

    def __init__(self):
        self.now = 0.0
        self.slept = []

    def monotonic(self):
        return self.now

    def sleep(self, seconds):
        self.slept.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock(monkeypatch):
    from agent import collectors

    clock = FakeClock()
    monkeypatch.setattr(collectors, "time", clock)
    return clock
