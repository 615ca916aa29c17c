"""
Logging setup for the agent's diagnostic output.

Alerts and the per-run summary are printed directly; this logger only
carries the extra detail shown with ``--verbose`` and warnings.
"""
import logging
import sys


def setup_logger(name: str = "agent", level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name; child loggers (``agent.collectors``...) inherit it
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates across repeated calls
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt="[%(levelname)s] %(message)s"))
    logger.addHandler(console_handler)

    logger.propagate = False
    return logger
