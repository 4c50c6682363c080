"""Data models for switch scraping."""

from switchexporter.models.port import AdminStatus, LinkStatus, OperStatus
from switchexporter.models.stats import PortStatistics

__all__ = [
    "AdminStatus",
    "OperStatus",
    "LinkStatus",
    "PortStatistics",
]
