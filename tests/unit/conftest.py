# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for promview unit tests."""

import pytest

from promview.common.exceptions import MetricsFetchError
from promview.service import PrometheusMetricsService


class StaticTextFetcher:
    """Fetcher returning canned payloads, one per call (the last one repeats)."""

    def __init__(self, *payloads: str) -> None:
        self._payloads = list(payloads) or [""]
        self.fetch_count = 0
        self.closed = False

    async def fetch_text(self) -> str:
        index = min(self.fetch_count, len(self._payloads) - 1)
        self.fetch_count += 1
        return self._payloads[index]

    async def close(self) -> None:
        self.closed = True


class FailingFetcher:
    """Fetcher that always fails the way an HTTP 503 would."""

    def __init__(self, reason: str = "Service Unavailable", status: int = 503) -> None:
        self.reason = reason
        self.status = status

    async def fetch_text(self) -> str:
        raise MetricsFetchError(
            f"Failed to fetch metrics: {self.reason}", status=self.status
        )

    async def close(self) -> None:
        pass


@pytest.fixture
def static_fetcher_factory():
    """Build a StaticTextFetcher from one or more payloads."""
    return StaticTextFetcher


@pytest.fixture
def service_factory():
    """Build a PrometheusMetricsService serving the given payloads."""

    def _make(*payloads: str) -> PrometheusMetricsService:
        return PrometheusMetricsService(StaticTextFetcher(*payloads))

    return _make


@pytest.fixture
def failing_service() -> PrometheusMetricsService:
    return PrometheusMetricsService(FailingFetcher())


@pytest.fixture
def http_latency_metrics() -> str:
    """Histogram scenario with a HELP/TYPE pair on the _bucket family."""
    return """# HELP http_latency_bucket desc
# TYPE http_latency_bucket histogram
http_latency_bucket{le="100"} 5
http_latency_bucket{le="+Inf"} 8
http_latency_sum 42
http_latency_count 8
"""


@pytest.fixture
def gatekeeper_metrics() -> str:
    """A scrape shaped like the gatekeeper appliance's /metrics output."""
    return """# HELP active_lease_count count of active leases
# TYPE active_lease_count gauge
active_lease_count 12
# HELP dhcp_op_counter Count by type of operations
# TYPE dhcp_op_counter counter
dhcp_op_counter{client="aa:bb:cc:dd:ee:01",hostname="laptop",op="DHCPDISCOVER"} 3
dhcp_op_counter{client="aa:bb:cc:dd:ee:01",hostname="laptop",op="DHCPOFFER"} 3
dhcp_op_counter{client="aa:bb:cc:dd:ee:02",hostname="phone",op="DHCPREQUEST"} 9
# HELP dhcp_req_time dhcp request time buckets
# TYPE dhcp_req_time histogram
dhcp_req_time_bucket{le="1"} 2
dhcp_req_time_bucket{le="10"} 10
dhcp_req_time_bucket{le="100"} 15
dhcp_req_time_bucket{le="+Inf"} 15
dhcp_req_time_sum 180.5
dhcp_req_time_count 15
# HELP dns_query_counter Count by domain
# TYPE dns_query_counter counter
dns_query_counter{domain="example.com",result="success",upstream="cache"} 40
dns_query_counter{domain="example.com",result="success",upstream="1.1.1.1"} 2
dns_query_counter{domain="gitlab.com",result="failed",upstream="8.8.8.8"} 1
# HELP dns_req_time dns request time in ms buckets
# TYPE dns_req_time histogram
dns_req_time_bucket{le="1"} 30
dns_req_time_bucket{le="10"} 38
dns_req_time_bucket{le="100"} 42
dns_req_time_bucket{le="250"} 43
dns_req_time_bucket{le="+Inf"} 43
dns_req_time_sum 612
dns_req_time_count 43
# HELP go_goroutines Number of goroutines that currently exist.
# TYPE go_goroutines gauge
go_goroutines 23
"""
