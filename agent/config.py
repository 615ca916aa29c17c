"""
Command-line configuration for the snapshot agent.

Every knob has a default, so running with no arguments collects one
sample into ``metrics_log.csv`` next to the working directory.
"""
import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from .alerts import alerts_path_for

CSV_FILE = "metrics_log.csv"
SAMPLE_INTERVAL = 1.0   # seconds per counter read

CPU_WARN = 90.0          # percent
MEM_WARN = 90.0          # percent used
DISK_FREE_WARN_GB = 5.0  # alert when free space drops to this or below
NET_WARN_MBPS = 100.0


@dataclass(frozen=True)
class AgentConfig:
    output_csv: str = CSV_FILE
    sample_interval: float = SAMPLE_INTERVAL
    cpu_warn: float = CPU_WARN
    mem_warn: float = MEM_WARN
    disk_free_warn_gb: float = DISK_FREE_WARN_GB
    net_warn_mbps: float = NET_WARN_MBPS
    count: int = 1
    every: float = 0.0
    post_url: Optional[str] = None
    verbose: bool = False

    @property
    def alerts_path(self) -> str:
        return alerts_path_for(self.output_csv)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="syswatch-snapshot",
        description=(
            "Collect CPU, memory, disk and network readings once, append "
            "them to a CSV file and log any threshold breaches."
        ),
    )
    parser.add_argument(
        "-o", "--output",
        default=CSV_FILE,
        help="CSV file to append to; alerts go to <name>.alerts.log (default: %(default)s)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=SAMPLE_INTERVAL,
        help="Sampling window in seconds for CPU and network, must be > 0 (default: %(default)s)",
    )
    parser.add_argument("--cpu-warn", type=float, default=CPU_WARN,
                        help="Alert when CPU percent is at or above this (default: %(default)s)")
    parser.add_argument("--mem-warn", type=float, default=MEM_WARN,
                        help="Alert when memory percent used is at or above this (default: %(default)s)")
    parser.add_argument("--disk-free-warn-gb", type=float, default=DISK_FREE_WARN_GB,
                        help="Alert when a volume has this many GB free or less (default: %(default)s)")
    parser.add_argument("--net-warn-mbps", type=float, default=NET_WARN_MBPS,
                        help="Alert when throughput is at or above this (default: %(default)s)")
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of samples to take before exiting (default: %(default)s)",
    )
    parser.add_argument(
        "--every",
        type=float,
        default=0.0,
        help="Seconds to wait between samples when --count > 1 (default: %(default)s)",
    )
    parser.add_argument(
        "--post-url",
        default=None,
        help="Optional ingest endpoint; each sample is POSTed there as JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> AgentConfig:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.interval <= 0:
        parser.error("--interval must be positive")
    if args.every < 0:
        parser.error("--every must not be negative")
    if args.count < 1:
        parser.error("--count must be at least 1")
    for name in ("cpu_warn", "mem_warn", "disk_free_warn_gb", "net_warn_mbps"):
        if getattr(args, name) < 0:
            parser.error(f"--{name.replace('_', '-')} must not be negative")

    return AgentConfig(
        output_csv=os.path.expanduser(args.output),
        sample_interval=args.interval,
        cpu_warn=args.cpu_warn,
        mem_warn=args.mem_warn,
        disk_free_warn_gb=args.disk_free_warn_gb,
        net_warn_mbps=args.net_warn_mbps,
        count=args.count,
        every=args.every,
        post_url=args.post_url,
        verbose=args.verbose,
    )
