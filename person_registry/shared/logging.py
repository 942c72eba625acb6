"""
Logging configuration for the person registry.

One pipe-separated line per record on stdout. Person ids may be logged;
request bodies and names never are.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per-request chatter from the server, the test client and the limiter.
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "httpx", "slowapi")


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger and quiet third-party request logs.

    Args:
        level: The log level name (DEBUG, INFO, WARNING, ERROR). Unknown
            names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
