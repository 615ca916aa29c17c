"""One-shot host metrics agent: CPU, memory, disk and network to CSV plus alerts."""

__version__ = "0.4.0"
