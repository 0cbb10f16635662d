# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promview.common.models.base_models import PromViewBaseModel
from promview.common.models.metric_models import (
    DashboardSummary,
    HistogramBucket,
    HistogramResult,
    MetricFamily,
    MetricSample,
    ParseResult,
)

__all__ = [
    "DashboardSummary",
    "HistogramBucket",
    "HistogramResult",
    "MetricFamily",
    "MetricSample",
    "ParseResult",
    "PromViewBaseModel",
]
