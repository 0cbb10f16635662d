# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio

import aiohttp

from promview.common.exceptions import MetricsFetchError
from promview.common.mixins import PromViewLoggerMixin


class HttpMetricsFetcher(PromViewLoggerMixin):
    """Fetches exposition text from a /metrics endpoint using aiohttp.

    The client session is created on first use and reused until `close()`.

    Args:
        url: URL of the metrics endpoint (e.g., "http://gatekeeper:8085/metrics")
        timeout: Total request timeout in seconds (None for no timeout)
        headers: Extra request headers
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._url = url
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = headers or {}
        self._session: aiohttp.ClientSession | None = None

    @property
    def url(self) -> str:
        """The metrics endpoint URL being scraped."""
        return self._url

    async def __aenter__(self) -> "HttpMetricsFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout, headers=self._headers
            )
        return self._session

    async def close(self) -> None:
        """Close the aiohttp client session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def fetch_text(self) -> str:
        """Fetch the raw metrics text.

        Returns:
            str: Raw metrics text in the exposition format

        Raises:
            MetricsFetchError: On a non-success status, a client error, or a timeout
        """
        self.debug(lambda: f"Fetching metrics from {self._url}")
        try:
            async with self._get_session().get(self._url) as response:
                if not response.ok:
                    raise MetricsFetchError(
                        f"Failed to fetch metrics: {response.reason}",
                        status=response.status,
                        url=self._url,
                    )
                text = await response.text()
        except aiohttp.ClientError as e:
            raise MetricsFetchError(
                f"Failed to fetch metrics: {e}", url=self._url
            ) from e
        except asyncio.TimeoutError as e:
            raise MetricsFetchError(
                f"Failed to fetch metrics: timed out after {self._timeout.total}s",
                url=self._url,
            ) from e

        self.debug(lambda: f"Fetched {len(text)} bytes from {self._url}")
        return text
