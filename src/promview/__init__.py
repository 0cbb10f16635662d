# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Scrape and query Prometheus text-exposition metrics."""

from promview.common.exceptions import (
    ConfigurationError,
    MetricsFetchError,
    PromViewError,
)
from promview.common.models import (
    DashboardSummary,
    HistogramBucket,
    HistogramResult,
    MetricFamily,
    MetricSample,
)
from promview.parser import parse_labels, parse_metrics
from promview.service import PrometheusMetricsService

__all__ = [
    "ConfigurationError",
    "DashboardSummary",
    "HistogramBucket",
    "HistogramResult",
    "MetricFamily",
    "MetricSample",
    "MetricsFetchError",
    "PromViewError",
    "PrometheusMetricsService",
    "parse_labels",
    "parse_metrics",
]
