"""
Structured logging configuration.

Every module logs under the ``vmware_client`` package logger, which carries
a ``NullHandler`` so an application that never configures logging sees no
output and no "no handlers could be found" warning. Records propagate to
whatever the application installs on the root logger.

``setup_logging`` is for programs (the example scripts, a quick REPL) that
want output without configuring logging themselves. Two formats:
  - **json**: machine-readable structured logs, one object per line.
  - **console**: human-friendly output.

Usage:
    from vmware_client.core.logging import setup_logging, get_logger

    setup_logging("DEBUG", "console")  # optional, once at startup
    logger = get_logger(__name__)      # per-module logger
    logger.info("Dispatching", extra={"operation": "list_vdcs"})
"""

import logging
import sys
from typing import IO, Literal

from pythonjsonlogger import json as json_logger

LIBRARY_LOGGER = "vmware_client"

LOG_FORMAT_CONSOLE = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO.
_QUIET_LOGGERS = ("httpcore", "httpx", "asyncio")

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


class _ManagedHandler(logging.StreamHandler):
    """Handler installed by ``setup_logging``; replaced on the next call."""


def setup_logging(
    level: str = "INFO",
    log_format: Literal["json", "console"] = "json",
    stream: IO[str] | None = None,
) -> logging.Handler:
    """
    Attach a stream handler to the root logger and return it.

    Calling again replaces the handler from the previous call; handlers
    installed by the application are left in place.

    Args:
        level:      Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: 'json' for structured JSON lines, 'console' for human-readable.
        stream:     Destination, stderr by default.
    """
    level = level.upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for existing in list(root_logger.handlers):
        if isinstance(existing, _ManagedHandler):
            root_logger.removeHandler(existing)
            existing.close()

    handler = _ManagedHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    if log_format == "json":
        handler.setFormatter(_build_json_formatter())
    else:
        handler.setFormatter(
            logging.Formatter(LOG_FORMAT_CONSOLE, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    get_logger(__name__).debug(
        "Logging initialised",
        extra={"log_level": level, "log_format": log_format},
    )
    return handler


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger.

    Convention: call with ``get_logger(__name__)`` in each module, so the
    logger sits under ``vmware_client``.
    """
    return logging.getLogger(name)


# ─── Internal ─────────────────────────────────────────────────────────


def _build_json_formatter() -> json_logger.JsonFormatter:
    return json_logger.JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt=LOG_DATE_FORMAT,
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        },
    )
