# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promview.parser.exposition_parser import (
    HELP_PREFIX,
    TYPE_PREFIX,
    parse_labels,
    parse_metrics,
    parse_sample_value,
)

__all__ = [
    "HELP_PREFIX",
    "TYPE_PREFIX",
    "parse_labels",
    "parse_metrics",
    "parse_sample_value",
]
