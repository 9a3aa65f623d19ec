"""Logging configuration for the command line."""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that log every request or statement at INFO/DEBUG
NOISY_LOGGERS = [
    "httpx",
    "httpcore",
    "sqlalchemy",
]


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
