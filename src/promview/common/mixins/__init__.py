# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promview.common.mixins.promview_logger_mixin import PromViewLoggerMixin

__all__ = ["PromViewLoggerMixin"]
