# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Projection of one scrape onto the metrics the gatekeeper appliance exports."""

import math

from promview.common.enums import CaseInsensitiveStrEnum
from promview.common.models import DashboardSummary, MetricSample, ParseResult
from promview.service.projections import (
    extract_counter_vec,
    extract_histogram,
    extract_scalar,
)


class GatekeeperMetric(CaseInsensitiveStrEnum):
    """Metric families exported by the gatekeeper DNS and DHCP servers."""

    DNS_REQ_TIME = "dns_req_time"
    """Histogram: DNS request time in ms buckets."""

    DNS_QUERY_COUNTER = "dns_query_counter"
    """Counter vec: queries by domain, upstream and result."""

    DNS_CACHE_HIT_COUNTER = "dns_cache_hit_counter"
    """Counter vec: cache hits by domain."""

    DNS_BLOCKED_DOMAIN_COUNTER = "dns_blocked_domain_counter"
    """Counter vec: blocked lookups by domain."""

    DNS_QUERY_BY_IP_COUNTER = "dns_query_by_ip_counter"
    """Counter vec: queries by client IP and result."""

    DHCP_REQ_TIME = "dhcp_req_time"
    """Histogram: DHCP request time in ms buckets."""

    DHCP_OP_COUNTER = "dhcp_op_counter"
    """Counter vec: operations by op, client and hostname."""

    ACTIVE_LEASE_COUNT = "active_lease_count"
    """Gauge: count of active leases."""


COUNTER_VEC_METRICS = (
    GatekeeperMetric.DNS_QUERY_COUNTER,
    GatekeeperMetric.DNS_CACHE_HIT_COUNTER,
    GatekeeperMetric.DNS_BLOCKED_DOMAIN_COUNTER,
    GatekeeperMetric.DNS_QUERY_BY_IP_COUNTER,
    GatekeeperMetric.DHCP_OP_COUNTER,
)


def build_dashboard(families: ParseResult) -> DashboardSummary:
    """Build the DNS/DHCP overview from an already parsed scrape."""
    return DashboardSummary(
        dns_latency=extract_histogram(families, GatekeeperMetric.DNS_REQ_TIME.value),
        dhcp_latency=extract_histogram(families, GatekeeperMetric.DHCP_REQ_TIME.value),
        active_leases=extract_scalar(
            families, GatekeeperMetric.ACTIVE_LEASE_COUNT.value
        ),
        counters={
            metric.value: extract_counter_vec(families, metric.value)
            for metric in COUNTER_VEC_METRICS
        },
    )


def _descending_value_key(sample: MetricSample) -> tuple[bool, float]:
    if math.isnan(sample.value):
        return True, 0.0
    return False, -sample.value


def top_samples(samples: list[MetricSample], n: int) -> list[MetricSample]:
    """The `n` highest-valued samples. Ties keep exposition order; NaN sorts last."""
    if n <= 0:
        return []
    return sorted(samples, key=_descending_value_key)[:n]
