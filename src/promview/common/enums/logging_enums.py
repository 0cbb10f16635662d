# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promview.common.enums.base_enums import CaseInsensitiveStrEnum


class PromViewLogLevel(CaseInsensitiveStrEnum):
    """Log levels accepted on the command line and in the environment."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
