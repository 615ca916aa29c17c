import logging
import time

from .alerts import write_alerts
from .collectors import collect_sample
from .config import parse_args
from .csv_log import append_sample, disk_summary, format_number, init_csv
from .log_config import setup_logger
from .shipper import ship_sample
from .thresholds import evaluate

logger = logging.getLogger("agent.snapshot")


def summary_line(sample):
    mem = sample.memory
    return (
        f"[{sample.timestamp}] "
        f"CPU={format_number(sample.cpu_percent)}% | "
        f"RAM={format_number(mem.percent_used)}% "
        f"({format_number(mem.used_mb)}/{format_number(mem.total_mb)} MB) | "
        f"Net={format_number(sample.net_mbps)} Mbps | "
        f"Disk={disk_summary(sample.disks) or '-'}"
    )


def run_once(config):
    """collect -> evaluate -> alerts -> CSV row -> summary"""
    sample = collect_sample(config)

    alerts = evaluate(sample, config)
    write_alerts(alerts, config.alerts_path, sample.timestamp)

    init_csv(config.output_csv)
    append_sample(config.output_csv, sample)
    logger.debug("Appended row to %s", config.output_csv)

    print(summary_line(sample))

    if config.post_url:
        ship_sample(config.post_url, sample)

    return sample, alerts


def main(argv=None):
    config = parse_args(argv)
    setup_logger("agent", logging.DEBUG if config.verbose else logging.INFO)

    if config.count > 1:
        logger.info(
            "Taking %d samples every %ss into %s", config.count, config.every, config.output_csv
        )

    for i in range(config.count):
        run_once(config)
        if i < config.count - 1:
            time.sleep(config.every)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
