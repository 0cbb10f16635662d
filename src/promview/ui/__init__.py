# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promview.ui.tables import (
    counter_vec_table,
    dashboard_renderables,
    families_table,
    format_value,
    histogram_table,
)

__all__ = [
    "counter_vec_table",
    "dashboard_renderables",
    "families_table",
    "format_value",
    "histogram_table",
]
