"""Abstract base transport for switch communication."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self

DEFAULT_TIMEOUT = 10.0


class BaseTransport(ABC):
    """Abstract base class for switch transports.

    Transports hold only connection settings and pooled resources; they keep
    no login state between calls.
    """

    def __init__(self, host: str, username: str, password: str, timeout: float | None = DEFAULT_TIMEOUT):
        self.host = host
        self.username = username
        self.password = password
        self.timeout = timeout

    @abstractmethod
    def close(self) -> None:
        """Release pooled connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        self.close()
