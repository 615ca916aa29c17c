import sys

import pandas as pd
import matplotlib.pyplot as plt

CSV_FILE = "metrics_log.csv"


def load_log(file_path):
    df = pd.read_csv(file_path, dtype={"Disk_Free_Summary": str})

    # Convert timestamp column to datetime type
    df["Timestamp"] = pd.to_datetime(df["Timestamp"])
    df["Disk_Free_Summary"] = df["Disk_Free_Summary"].fillna("")

    # Set timestamp as index (common in time series)
    return df.set_index("Timestamp")


def parse_disk_summary(summary):
    """'C:=10GB;D:=2.5GB' -> {'C:': 10.0, 'D:': 2.5}"""
    free = {}
    for pair in summary.split(";"):
        if not pair:
            continue
        drive, _, value = pair.rpartition("=")
        free[drive] = float(value.removesuffix("GB"))
    return free


def disk_free_table(df):
    """One column per drive with its free GB; NaN where a drive was absent."""
    rows = [parse_disk_summary(s) for s in df["Disk_Free_Summary"]]
    return pd.DataFrame(rows, index=df.index)


def plot_log(df):
    fig, (ax_pct, ax_net, ax_disk) = plt.subplots(3, 1, sharex=True, figsize=(10, 8))

    ax_pct.plot(df.index, df["CPU_Percent"], label="CPU (%)")
    ax_pct.plot(df.index, df["Mem_Pct_Used"], label="Memory used (%)")
    ax_pct.set_ylabel("Usage (%)")
    ax_pct.legend()

    ax_net.plot(df.index, df["Net_Mbps"], label="Network (Mbps)")
    ax_net.set_ylabel("Mbps")

    disks = disk_free_table(df)
    for drive in disks.columns:
        ax_disk.plot(disks.index, disks[drive], label=drive)
    ax_disk.set_ylabel("Free (GB)")
    if len(disks.columns):
        ax_disk.legend()

    ax_disk.set_xlabel("Time")
    fig.suptitle("Host Metrics Over Time")
    plt.xticks(rotation=45)
    plt.tight_layout()
    plt.show()


def main():
    file_path = sys.argv[1] if len(sys.argv) > 1 else CSV_FILE
    print(f"Loading data from {file_path}...")
    df = load_log(file_path)

    print(f"Loaded {len(df)} rows.")
    print(df.head())

    if len(df) < 2:
        print("Not enough data (<2 rows). Run the agent more to collect data.")
        return

    plot_log(df)


if __name__ == "__main__":
    main()
