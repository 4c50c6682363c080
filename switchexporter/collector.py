"""Prometheus collector exposing per-port switch statistics."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from loguru import logger
from prometheus_client.metrics_core import CounterMetricFamily, GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

from switchexporter.base.client import BaseSwitchClient
from switchexporter.exceptions import SwitchError

if TYPE_CHECKING:
    from loguru import Logger

PORT_LABEL = "port"

# (metric name, help, family type, PortStatistics attribute)
PORT_METRICS: tuple[tuple[str, str, type[GaugeMetricFamily] | type[CounterMetricFamily], str], ...] = (
    ("ifAdminStatus", "SNMP admin status", GaugeMetricFamily, "admin_status"),
    ("ifOperStatus", "SNMP operational status", GaugeMetricFamily, "oper_status"),
    ("ifSpeed", "SNMP interface nominal speed", GaugeMetricFamily, "speed"),
    ("ifInUcastPkts", "SNMP received packets", CounterMetricFamily, "in_ucast_pkts"),
    ("ifInErrors", "SNMP received packets with errors", CounterMetricFamily, "in_errors"),
    ("ifOutUcastPkts", "SNMP sent packets", CounterMetricFamily, "out_ucast_pkts"),
    ("ifOutErrors", "SNMP sent packets with errors", CounterMetricFamily, "out_errors"),
)


class SwitchCollector(Collector):
    """Scrape the switch on every collect and emit one sample per port and field.

    A failed scrape is logged and yields no port samples; the request
    metrics of the client are emitted either way.
    """

    def __init__(self, client: BaseSwitchClient, log: Logger | None = None) -> None:
        self._client = client
        self._log = log if log is not None else logger.bind(classname=type(self).__name__, host=client.host)

    @staticmethod
    def _port_families() -> list[GaugeMetricFamily | CounterMetricFamily]:
        return [family_cls(name, doc, labels=[PORT_LABEL]) for name, doc, family_cls, _ in PORT_METRICS]

    def describe(self) -> Iterable[Metric]:
        yield from self._port_families()
        yield from self._client.request_metrics.describe()

    def collect(self) -> Iterable[Metric]:
        try:
            stats = self._client.get_port_stats()
        except SwitchError as e:
            self._log.error("unable to update metrics: {}", e)
            stats = []

        families = self._port_families()
        for pos, port_stats in enumerate(stats):
            port_label = str(pos + 1)
            for family, (name, _, _, attr) in zip(families, PORT_METRICS):
                try:
                    value = float(getattr(port_stats, attr))
                except (AttributeError, TypeError, ValueError) as e:
                    self._log.error("unable to generate metric {} for port {}: {}", name, port_label, e)
                    continue
                family.add_metric([port_label], value)

        for family in families:
            if family.samples:
                yield family

        yield from self._client.request_metrics.collect()
