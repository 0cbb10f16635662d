# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Typed, read-only queries over a freshly scraped exposition payload.

Every query fetches and parses the payload again; nothing is cached between
calls, so two calls may observe different scrapes.
"""

from collections.abc import Iterable

from promview.common.config import MetricsSettings
from promview.common.mixins import PromViewLoggerMixin
from promview.common.models import (
    DashboardSummary,
    HistogramResult,
    MetricFamily,
    MetricSample,
    ParseResult,
)
from promview.common.protocols import MetricsTextFetcherProtocol
from promview.parser import parse_metrics
from promview.service.dashboard import build_dashboard
from promview.service.projections import (
    extract_counter_vec,
    extract_histogram,
    extract_scalar,
)
from promview.transports import create_fetcher


class PrometheusMetricsService(PromViewLoggerMixin):
    """Query gauges, counters, counter vectors and histograms from a metrics source.

    Args:
        fetcher: Produces the raw exposition text for each query.
    """

    def __init__(self, fetcher: MetricsTextFetcherProtocol, **kwargs) -> None:
        super().__init__(**kwargs)
        self._fetcher = fetcher

    @classmethod
    def from_settings(
        cls, settings: MetricsSettings | None = None
    ) -> "PrometheusMetricsService":
        """Create a service scraping `settings.source` (environment defaults if omitted)."""
        settings = settings or MetricsSettings()
        return cls(create_fetcher(settings.source, timeout=settings.timeout))

    @property
    def fetcher(self) -> MetricsTextFetcherProtocol:
        return self._fetcher

    async def __aenter__(self) -> "PrometheusMetricsService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._fetcher.close()

    async def fetch_metrics(self) -> str:
        """Fetch the raw exposition text.

        Raises:
            MetricsFetchError: If the source could not be read
        """
        return await self._fetcher.fetch_text()

    def parse_metrics(self, metrics_text: str) -> ParseResult:
        """Parse exposition text into a family map."""
        return parse_metrics(metrics_text)

    async def _scrape(self) -> ParseResult:
        metrics_text = await self.fetch_metrics()
        return self.parse_metrics(metrics_text)

    async def get_histogram(self, metric_name: str) -> HistogramResult:
        """Get a histogram by base name (without the _bucket, _sum and _count suffixes).

        Returns:
            HistogramResult: Cumulative buckets sorted by upper bound (+Inf excluded),
                sum, count, and sum / count as the average (0 when count is 0)
        """
        return extract_histogram(await self._scrape(), metric_name)

    async def get_gauge(self, metric_name: str) -> float:
        """Current value of a gauge, or 0.0 if it is not exposed."""
        return extract_scalar(await self._scrape(), metric_name)

    async def get_counter(self, metric_name: str) -> float:
        """Current value of a counter, or 0.0 if it is not exposed."""
        return extract_scalar(await self._scrape(), metric_name)

    async def get_counter_vec(self, metric_name: str) -> list[MetricSample]:
        """All labelled samples of a counter vector, or [] if it is not exposed."""
        return extract_counter_vec(await self._scrape(), metric_name)

    async def get_metric(self, metric_name: str) -> MetricFamily | None:
        """Raw family (help, type, samples) for a name, or None if it is not exposed."""
        return (await self._scrape()).get(metric_name)

    async def get_metrics(
        self, metric_names: Iterable[str]
    ) -> dict[str, MetricFamily | None]:
        """Look up several families from a single scrape.

        Names that are not exposed map to None.
        """
        families = await self._scrape()
        return {name: families.get(name) for name in metric_names}

    async def get_all_metrics(self) -> ParseResult:
        """Every family from a single scrape."""
        return await self._scrape()

    async def get_dashboard(self) -> DashboardSummary:
        """Gatekeeper DNS/DHCP overview from a single scrape."""
        families = await self._scrape()
        self.debug(lambda: f"Building dashboard from {len(families)} families")
        return build_dashboard(families)
