# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TypeAlias

from pydantic import Field

from promview.common.enums import PrometheusMetricType
from promview.common.models.base_models import PromViewBaseModel


class MetricSample(PromViewBaseModel):
    """Single (label set, value) observation within a metric family."""

    labels: dict[str, str] = Field(
        default_factory=dict,
        description="Label name to raw label value. Empty if the sample line had no label block.",
    )
    value: float = Field(
        description="Sample value. May be NaN when the exposition reported NaN."
    )


class MetricFamily(PromViewBaseModel):
    """Named group of samples sharing one help text and type."""

    help: str = Field(default="", description="Text of the # HELP directive")
    type: str = Field(
        default="",
        description="Kind from the # TYPE directive, taken verbatim and never validated",
    )
    samples: list[MetricSample] = Field(
        default_factory=list,
        description="Samples in order of first appearance in the exposition text",
    )

    @property
    def metric_type(self) -> PrometheusMetricType:
        """The TYPE directive mapped onto the known vocabulary (UNTYPED otherwise)."""
        return PrometheusMetricType(self.type)


ParseResult: TypeAlias = dict[str, MetricFamily]
"""Family name to family, for a single parse of one exposition payload."""


class HistogramBucket(PromViewBaseModel):
    """One finite histogram bucket. Counts are cumulative, as exposed."""

    upper_bound: float = Field(description='Upper bound from the "le" label')
    cumulative_count: float = Field(
        description="Number of observations less than or equal to upper_bound"
    )


class HistogramResult(PromViewBaseModel):
    """Histogram view derived from the <base>_bucket, <base>_sum and <base>_count families."""

    buckets: list[HistogramBucket] = Field(
        default_factory=list,
        description="Finite buckets sorted ascending by upper_bound. The +Inf bucket is excluded.",
    )
    sum: float = Field(default=0.0, description="Sum of all observed values")
    count: float = Field(default=0.0, description="Total number of observations")
    average: float = Field(
        default=0.0, description="sum / count, or 0 when count is 0"
    )


class DashboardSummary(PromViewBaseModel):
    """All gatekeeper appliance metrics taken from a single scrape."""

    dns_latency: HistogramResult = Field(
        default_factory=HistogramResult,
        description="DNS request time in milliseconds",
    )
    dhcp_latency: HistogramResult = Field(
        default_factory=HistogramResult,
        description="DHCP request time in milliseconds",
    )
    active_leases: float = Field(default=0.0, description="Count of active leases")
    counters: dict[str, list[MetricSample]] = Field(
        default_factory=dict,
        description="Counter vectors keyed by family name",
    )
