# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from urllib.parse import urlparse

from promview.common.protocols import MetricsTextFetcherProtocol
from promview.transports.file_fetcher import FileMetricsFetcher
from promview.transports.http_fetcher import HttpMetricsFetcher

_HTTP_SCHEMES = ("http", "https")


def create_fetcher(
    source: str, timeout: float | None = None
) -> MetricsTextFetcherProtocol:
    """Create an HTTP fetcher for http(s) URLs and a file fetcher for anything else."""
    if urlparse(source).scheme.lower() in _HTTP_SCHEMES:
        return HttpMetricsFetcher(source, timeout=timeout)
    return FileMetricsFetcher(source)
