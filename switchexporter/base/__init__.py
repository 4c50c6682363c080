"""Abstract base classes for switch scraping."""

from switchexporter.base.client import BaseSwitchClient
from switchexporter.base.transport import DEFAULT_TIMEOUT, BaseTransport

__all__ = [
    "DEFAULT_TIMEOUT",
    "BaseTransport",
    "BaseSwitchClient",
]
