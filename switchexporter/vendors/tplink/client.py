"""TP-Link Easy Smart (TL-SG108E) switch client."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from switchexporter.base.client import BaseSwitchClient
from switchexporter.base.transport import DEFAULT_TIMEOUT
from switchexporter.exceptions import UnrecognizedPageFormat
from switchexporter.metrics import RequestMetrics
from switchexporter.models.stats import PortStatistics
from switchexporter.vendors.tplink.http import TPLinkHTTPTransport
from switchexporter.vendors.tplink.parser import parse_port_statistics

if TYPE_CHECKING:
    from loguru import Logger


class TPLinkSwitch(BaseSwitchClient):
    """Client for the TP-Link Easy Smart web interface.

    Every :meth:`get_port_stats` call logs in and fetches the statistics
    page again; no session survives between calls.

    Usage::

        with TPLinkSwitch(host="192.168.0.1", password="admin") as switch:
            for port, stats in enumerate(switch.get_port_stats(), start=1):
                print(port, stats.oper_status.name, stats.in_ucast_pkts)
    """

    def __init__(
        self,
        host: str,
        password: str,
        username: str = "admin",
        timeout: float | None = DEFAULT_TIMEOUT,
        log: Logger | None = None,
    ):
        super().__init__(host)
        self._log = log if log is not None else logger.bind(classname=type(self).__name__, host=host)
        self._http = TPLinkHTTPTransport(
            host=host,
            username=username,
            password=password,
            timeout=timeout,
        )

    @property
    def request_metrics(self) -> RequestMetrics:
        return self._http.metrics

    def get_port_stats(self) -> list[PortStatistics]:
        session = self._http.new_session()
        self._http.login(session)
        page = self._http.get_port_statistics_page(session)

        try:
            return parse_port_statistics(page)
        except UnrecognizedPageFormat as e:
            self._log.error("Unrecognized port statistics page from {}:\n{}", self.host, e.page)
            raise

    def close(self) -> None:
        self._http.close()
