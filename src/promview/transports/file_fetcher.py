# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pathlib import Path

import aiofiles

from promview.common.exceptions import MetricsFetchError
from promview.common.mixins import PromViewLoggerMixin


class FileMetricsFetcher(PromViewLoggerMixin):
    """Reads exposition text from a saved scrape on disk."""

    def __init__(self, path: str | Path, **kwargs) -> None:
        super().__init__(**kwargs)
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def fetch_text(self) -> str:
        try:
            async with aiofiles.open(self._path, encoding="utf-8") as f:
                text = await f.read()
        except OSError as e:
            raise MetricsFetchError(
                f"Failed to read metrics from {self._path}: {e.strerror or e}"
            ) from e
        self.debug(lambda: f"Read {len(text)} bytes from {self._path}")
        return text

    async def close(self) -> None:
        """Nothing to release; files are opened per fetch."""
