# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promview.service.dashboard import GatekeeperMetric, build_dashboard, top_samples
from promview.service.metrics_service import PrometheusMetricsService
from promview.service.projections import (
    extract_counter_vec,
    extract_histogram,
    extract_scalar,
)

__all__ = [
    "GatekeeperMetric",
    "PrometheusMetricsService",
    "build_dashboard",
    "extract_counter_vec",
    "extract_histogram",
    "extract_scalar",
    "top_samples",
]
