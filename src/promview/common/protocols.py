# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsTextFetcherProtocol(Protocol):
    """Anything that can produce a raw exposition payload.

    Implementations raise MetricsFetchError when the source cannot be read.
    """

    async def fetch_text(self) -> str: ...

    async def close(self) -> None: ...
