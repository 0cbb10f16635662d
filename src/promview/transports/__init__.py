# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promview.transports.file_fetcher import FileMetricsFetcher
from promview.transports.http_fetcher import HttpMetricsFetcher
from promview.transports.fetcher_factory import create_fetcher

__all__ = [
    "FileMetricsFetcher",
    "HttpMetricsFetcher",
    "create_fetcher",
]
