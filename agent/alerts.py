import os
from datetime import datetime

ALERTS_SUFFIX = ".alerts.log"


def alerts_path_for(csv_path):
    """metrics.csv -> metrics.alerts.log, next to the CSV."""
    root, _ext = os.path.splitext(csv_path)
    return root + ALERTS_SUFFIX


def write_alert(message, alerts_path, timestamp=None):
    """
    Append ``<timestamp> | <message>`` to the alerts log and echo it to
    the console. The file is created on first use and never truncated.
    """
    if timestamp is None:
        timestamp = datetime.now().isoformat(timespec="seconds")

    with open(alerts_path, mode="a", encoding="utf-8") as f:
        f.write(f"{timestamp} | {message}\n")

    print(f"[ALERT] {message}")


def write_alerts(messages, alerts_path, timestamp=None):
    for message in messages:
        write_alert(message, alerts_path, timestamp)
