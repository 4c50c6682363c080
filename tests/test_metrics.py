"""Tests for switch request instrumentation."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from switchexporter.metrics import RequestMetrics


def _sample_value(metrics: RequestMetrics, name: str, labels: dict[str, str] | None = None) -> float | None:
    for family in metrics.collect():
        for sample in family.samples:
            if sample.name == name and sample.labels == (labels or {}):
                return sample.value
    return None


def _response(status_code: int) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    return resp


class TestRequestMetrics:
    """Test RequestMetrics.instrument and its exported samples."""

    def test_counts_response(self):
        """A completed request is counted by code and lowercase method."""
        metrics = RequestMetrics()
        resp = _response(200)

        result = metrics.instrument("GET", lambda: resp)

        assert result is resp
        assert _sample_value(metrics, "switch_requests_total", {"code": "200", "method": "get"}) == 1.0
        assert _sample_value(metrics, "switch_request_duration_seconds_count", {"method": "get"}) == 1.0

    def test_counts_error_status(self):
        """Non-2xx responses are still counted under their code."""
        metrics = RequestMetrics()

        metrics.instrument("POST", lambda: _response(401))
        metrics.instrument("POST", lambda: _response(401))

        assert _sample_value(metrics, "switch_requests_total", {"code": "401", "method": "post"}) == 2.0

    def test_in_flight_during_request(self):
        """The in-flight gauge is raised while the request runs."""
        metrics = RequestMetrics()
        seen: list[float | None] = []

        def send():
            seen.append(_sample_value(metrics, "switch_in_flight_requests"))
            return _response(200)

        metrics.instrument("GET", send)

        assert seen == [1.0]
        assert _sample_value(metrics, "switch_in_flight_requests") == 0.0

    def test_failed_request_not_counted(self):
        """A request that raises is not counted and leaves no request in flight."""
        metrics = RequestMetrics()

        def send():
            raise requests.ConnectionError("unreachable")

        with pytest.raises(requests.ConnectionError):
            metrics.instrument("GET", send)

        assert _sample_value(metrics, "switch_requests_total", {"code": "200", "method": "get"}) is None
        assert _sample_value(metrics, "switch_in_flight_requests") == 0.0

    def test_describe_names(self):
        """describe() yields the three request metrics."""
        names = [m.name for m in RequestMetrics().describe()]

        assert sorted(names) == sorted(
            ["switch_requests", "switch_request_duration_seconds", "switch_in_flight_requests"]
        )

    def test_duration_buckets(self):
        """Latency buckets follow the Go client library defaults."""
        metrics = RequestMetrics()
        metrics.instrument("GET", lambda: _response(200))

        bounds = [
            sample.labels["le"]
            for family in metrics.collect()
            for sample in family.samples
            if sample.name == "switch_request_duration_seconds_bucket"
        ]

        assert bounds == ["0.005", "0.01", "0.025", "0.05", "0.1", "0.25", "0.5", "1.0", "2.5", "5.0", "10.0", "+Inf"]

    def test_instances_are_independent(self):
        """Metrics are not shared through a global registry."""
        first = RequestMetrics()
        second = RequestMetrics()

        first.instrument("GET", lambda: _response(200))

        assert _sample_value(second, "switch_requests_total", {"code": "200", "method": "get"}) is None
