import csv
import os

HEADER = [
    "Timestamp",
    "CPU_Percent",
    "Mem_Total_MB",
    "Mem_Used_MB",
    "Mem_Free_MB",
    "Mem_Pct_Used",
    "Net_Mbps",
    "Disk_Free_Summary",
]


def format_number(value):
    """Two decimals at most, trailing zeros dropped: 10.0 -> '10', 2.50 -> '2.5'."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def disk_summary(disks):
    # NOTE: drive ids are not escaped; a ';' or '=' in one makes the field ambiguous
    return ";".join(f"{d.drive}={format_number(d.free_gb)}GB" for d in disks)


def sample_row(sample):
    mem = sample.memory
    return [
        sample.timestamp,
        format_number(sample.cpu_percent),
        format_number(mem.total_mb),
        format_number(mem.used_mb),
        format_number(mem.free_mb),
        format_number(mem.percent_used),
        format_number(sample.net_mbps),
        disk_summary(sample.disks),
    ]


def init_csv(file_path):
    """Create CSV with header if it doesn't exist."""
    if not os.path.isfile(file_path):
        with open(file_path, mode="w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(HEADER)


def append_sample(file_path, sample):
    """Append one row of metrics to CSV."""
    with open(file_path, mode="a", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(sample_row(sample))
