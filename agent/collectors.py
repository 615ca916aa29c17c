"""
Metric readers.

Each reader takes nothing beyond a sampling interval and hands back plain
numbers or snapshots. psutil faults are not caught here: a counter that
cannot be read aborts the run.
"""
import logging
import socket
import time
from datetime import datetime

import psutil

from .models import DiskSnapshot, MemorySnapshot, Sample

logger = logging.getLogger(__name__)

MB = 1024 ** 2
GB = 1024 ** 3

# Filesystems that live on another machine, never counted as local volumes.
NETWORK_FSTYPES = {
    "nfs", "nfs4", "cifs", "smbfs", "smb3", "sshfs", "fuse.sshfs",
    "afpfs", "9p", "davfs", "glusterfs", "ceph",
}

# Read-only images (snaps, mounted ISOs) always report ~0 free.
IMAGE_FSTYPES = {"squashfs", "iso9660", "udf", "erofs", "cramfs"}


def percent_used(used, total):
    if not total:
        return 0.0
    return round(used / total * 100, 2)


def read_cpu_percent(interval=1.0):
    """% CPU over ``interval`` seconds, across all cores."""
    return round(psutil.cpu_percent(interval=interval), 2)


def read_memory():
    vm = psutil.virtual_memory()
    total = vm.total
    free = vm.available
    used = total - free

    return MemorySnapshot(
        total_mb=round(total / MB, 2),
        used_mb=round(used / MB, 2),
        free_mb=round(free / MB, 2),
        percent_used=percent_used(used, total),
    )


def is_local_fixed(partition):
    """
    True for fixed disks. False for removable, optical, network or empty
    drives, and for read-only mounts (loop images, bind mounts) whose free
    space cannot change.
    """
    opts = [o.strip().lower() for o in partition.opts.split(",")]
    if "cdrom" in opts or "removable" in opts or "ro" in opts:
        return False
    # no fstype means no media in the drive (empty card reader, etc.)
    if not partition.fstype:
        return False
    if partition.device.startswith("/dev/loop"):
        return False
    fstype = partition.fstype.lower()
    return fstype not in NETWORK_FSTYPES and fstype not in IMAGE_FSTYPES


def drive_id(mountpoint):
    # "C:\\" -> "C:", "/mnt/data/" -> "/mnt/data", "/" stays "/"
    return mountpoint.rstrip("\\/") or mountpoint


def read_disks():
    disks = []
    for part in psutil.disk_partitions(all=False):
        if not is_local_fixed(part):
            logger.debug("Skipping %s (%s, %s)", part.mountpoint, part.fstype, part.opts)
            continue

        usage = psutil.disk_usage(part.mountpoint)
        size = usage.total
        free = usage.free
        used = size - free

        disks.append(
            DiskSnapshot(
                drive=drive_id(part.mountpoint),
                size_gb=round(size / GB, 2),
                used_gb=round(used / GB, 2),
                free_gb=round(free / GB, 2),
                percent_used=percent_used(used, size),
            )
        )
    return tuple(disks)


def throughput_mbps(rates):
    """Sum per-interface bytes/sec and convert to megabits/sec."""
    total = sum(rates)
    if total <= 0:
        return 0.0
    return round(total * 8 / 1_000_000, 2)


def interface_rates(before, after, elapsed):
    """
    Bytes/sec (sent + received) per interface between two
    ``psutil.net_io_counters(pernic=True)`` readings.

    Interfaces that vanished between the reads are ignored, and a counter
    that went backwards (reset, wrap) counts as zero.
    """
    if elapsed <= 0:
        elapsed = 1.0

    rates = []
    for nic, end in after.items():
        start = before.get(nic)
        if start is None:
            continue
        delta = (end.bytes_sent - start.bytes_sent) + (end.bytes_recv - start.bytes_recv)
        rates.append(max(delta, 0) / elapsed)
    return rates


def read_net_mbps(interval=1.0):
    before = psutil.net_io_counters(pernic=True)
    if not before:
        return 0.0

    t0 = time.monotonic()
    time.sleep(interval)
    after = psutil.net_io_counters(pernic=True)
    elapsed = time.monotonic() - t0

    return throughput_mbps(interface_rates(before, after, elapsed))


def collect_sample(config):
    """Run every reader once, in fixed order, and freeze the result."""
    timestamp = datetime.now().isoformat(timespec="seconds")
    host = socket.gethostname()

    cpu = read_cpu_percent(config.sample_interval)
    memory = read_memory()
    disks = read_disks()
    net = read_net_mbps(config.sample_interval)

    logger.debug(
        "Read cpu=%s mem=%s disks=%d net=%s", cpu, memory.percent_used, len(disks), net
    )
    return Sample(
        timestamp=timestamp,
        host=host,
        cpu_percent=cpu,
        memory=memory,
        disks=disks,
        net_mbps=net,
    )
