"""Instrumentation for the HTTP requests sent to the switch."""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import Callable

import requests
from prometheus_client import Counter, Gauge, Histogram
from prometheus_client.metrics_core import Metric

# Same bucket layout as the Go client library defaults.
DURATION_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, float("inf"))


class RequestMetrics:
    """In-flight gauge, request counter and latency histogram for switch requests.

    The metrics are not registered anywhere; the owning collector exposes them
    through :meth:`describe` and :meth:`collect`.
    """

    def __init__(self) -> None:
        self.in_flight = Gauge(
            "switch_in_flight_requests",
            "A gauge of in-flight requests for the wrapped client.",
            registry=None,
        )
        self.requests_total = Counter(
            "switch_requests_total",
            "A counter for requests from the wrapped client.",
            ["code", "method"],
            registry=None,
        )
        self.duration = Histogram(
            "switch_request_duration_seconds",
            "A histogram of request latencies.",
            ["method"],
            buckets=DURATION_BUCKETS,
            registry=None,
        )

    def instrument(self, method: str, send: Callable[[], requests.Response]) -> requests.Response:
        """Run ``send`` while tracking it as an in-flight request.

        Requests that end in an exception are not counted.
        """
        method = method.lower()
        with self.in_flight.track_inprogress():
            start = time.perf_counter()
            resp = send()
            elapsed = time.perf_counter() - start

        self.requests_total.labels(code=str(resp.status_code), method=method).inc()
        self.duration.labels(method=method).observe(elapsed)
        return resp

    def describe(self) -> Iterable[Metric]:
        for metric in (self.requests_total, self.duration, self.in_flight):
            yield from metric.describe()

    def collect(self) -> Iterable[Metric]:
        for metric in (self.requests_total, self.duration, self.in_flight):
            yield from metric.collect()
