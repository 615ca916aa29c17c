from .csv_log import format_number


def evaluate(sample, config):
    """
    Compare one sample against the configured thresholds.

    Returns the alert messages in a fixed order: CPU, memory, each disk
    in enumeration order, network. Every comparison includes the boundary.
    """
    alerts = []

    if sample.cpu_percent >= config.cpu_warn:
        alerts.append(
            f"High CPU usage: {format_number(sample.cpu_percent)}% "
            f"(threshold {format_number(config.cpu_warn)}%)"
        )

    mem_pct = sample.memory.percent_used
    if mem_pct >= config.mem_warn:
        alerts.append(
            f"High memory usage: {format_number(mem_pct)}% "
            f"(threshold {format_number(config.mem_warn)}%)"
        )

    for disk in sample.disks:
        if disk.free_gb <= config.disk_free_warn_gb:
            alerts.append(
                f"Low disk space on {disk.drive} ({format_number(disk.free_gb)}GB free, "
                f"threshold {format_number(config.disk_free_warn_gb)}GB)"
            )

    if sample.net_mbps >= config.net_warn_mbps:
        alerts.append(
            f"High network throughput: {format_number(sample.net_mbps)} Mbps "
            f"(threshold {format_number(config.net_warn_mbps)} Mbps)"
        )

    return alerts
