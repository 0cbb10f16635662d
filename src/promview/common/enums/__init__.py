# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promview.common.enums.base_enums import CaseInsensitiveStrEnum
from promview.common.enums.prometheus_enums import PrometheusMetricType
from promview.common.enums.logging_enums import PromViewLogLevel

__all__ = [
    "CaseInsensitiveStrEnum",
    "PromViewLogLevel",
    "PrometheusMetricType",
]
