"""Abstract base switch client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any, Self

from switchexporter.metrics import RequestMetrics
from switchexporter.models.stats import PortStatistics


class BaseSwitchClient(ABC):
    """Abstract base class for model-specific switch clients.

    A client turns one call to :meth:`get_port_stats` into a fresh snapshot
    of every port. It must be safe to call from several threads at once.
    """

    def __init__(self, host: str, **kwargs: Any) -> None:
        self._host = host

    @property
    def host(self) -> str:
        """Switch hostname or IP address."""
        return self._host

    @property
    @abstractmethod
    def request_metrics(self) -> RequestMetrics:
        """Instrumentation of the HTTP requests sent to the switch."""

    @abstractmethod
    def get_port_stats(self) -> list[PortStatistics]:
        """Fetch statistics for all ports, position ``i`` being port ``i + 1``.

        Raises:
            SwitchError: On any transport, authentication or parse failure.
        """

    @abstractmethod
    def close(self) -> None:
        """Release transport resources."""

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        self.close()
