"""Prometheus exporter for TP-Link Easy Smart switch port statistics.

Scrapes the switch web interface on every Prometheus scrape and republishes
per-port status and packet counters.
"""

__version__ = "0.1.0"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    level: str | None = None,
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter.

    ``level`` overrides the ``LOGURU_LEVEL`` environment variable.
    """
    if level is not None:
        os.environ["LOGURU_LEVEL"] = level
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "INFO")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})
    glogger.enable(__name__)


from switchexporter.base.client import BaseSwitchClient  # noqa: E402
from switchexporter.collector import SwitchCollector  # noqa: E402
from switchexporter.exceptions import (  # noqa: E402
    AuthenticationError,
    AuthenticationFailed,
    FetchError,
    MalformedField,
    ParseError,
    SwitchError,
    TransportError,
    UnrecognizedPageFormat,
)
from switchexporter.models import PortStatistics  # noqa: E402
from switchexporter.vendors.tplink import TPLinkSwitch  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "BaseSwitchClient",
    "SwitchCollector",
    "TPLinkSwitch",
    "PortStatistics",
    "SwitchError",
    "TransportError",
    "AuthenticationError",
    "AuthenticationFailed",
    "FetchError",
    "ParseError",
    "UnrecognizedPageFormat",
    "MalformedField",
]
