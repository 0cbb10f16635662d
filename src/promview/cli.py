# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for promview."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Annotated, Any, TypeVar

import orjson
from cyclopts import App, Parameter
from rich.console import Console

from promview.cli_utils import exit_on_error
from promview.common.config import MetricsSettings
from promview.common.logging import setup_rich_logging
from promview.service import PrometheusMetricsService
from promview.ui import (
    counter_vec_table,
    dashboard_renderables,
    families_table,
    format_value,
    histogram_table,
)

app = App(name="promview", help="Query Prometheus metrics exposed by a gatekeeper appliance")

console = Console()

SettingsArg = Annotated[MetricsSettings | None, Parameter(name="*")]

T = TypeVar("T")


def _run(
    settings: MetricsSettings | None,
    query: Callable[[PrometheusMetricsService], Awaitable[T]],
) -> T:
    """Set up logging, run one query against the configured source, and close it."""
    settings = settings or MetricsSettings()
    setup_rich_logging(settings)

    async def _query() -> T:
        async with PrometheusMetricsService.from_settings(settings) as service:
            return await query(service)

    return asyncio.run(_query())


def _print_json(data: Any) -> None:
    console.print_json(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8"))


@app.command(name="gauge")
def gauge(name: str, settings: SettingsArg = None) -> None:
    """Print the current value of a gauge (0 if it is not exposed).

    Args:
        name: Gauge metric name
    """
    with exit_on_error(title="Error Reading Gauge"):
        value = _run(settings, lambda service: service.get_gauge(name))
        console.print(format_value(value))


@app.command(name="counter")
def counter(name: str, settings: SettingsArg = None) -> None:
    """Print the current value of a counter (0 if it is not exposed).

    Args:
        name: Counter metric name
    """
    with exit_on_error(title="Error Reading Counter"):
        value = _run(settings, lambda service: service.get_counter(name))
        console.print(format_value(value))


@app.command(name="counter-vec")
def counter_vec(name: str, settings: SettingsArg = None) -> None:
    """Print every labelled sample of a counter vector.

    Args:
        name: Counter vector metric name
    """
    with exit_on_error(title="Error Reading Counter Vector"):
        samples = _run(settings, lambda service: service.get_counter_vec(name))
        console.print(counter_vec_table(name, samples))


@app.command(name="histogram")
def histogram(name: str, settings: SettingsArg = None) -> None:
    """Print the buckets, sum, count and average of a histogram.

    Args:
        name: Base name of the histogram, without the _bucket, _sum and _count suffixes
    """
    with exit_on_error(title="Error Reading Histogram"):
        result = _run(settings, lambda service: service.get_histogram(name))
        console.print(histogram_table(name, result))


@app.command(name="metric")
def metric(name: str, settings: SettingsArg = None) -> None:
    """Print a metric family (help, type and samples) as JSON, or null if missing.

    Args:
        name: Metric family name
    """
    with exit_on_error(title="Error Reading Metric"):
        family = _run(settings, lambda service: service.get_metric(name))
        _print_json(family.model_dump() if family is not None else None)


@app.command(name="metrics")
def metrics(names: list[str], settings: SettingsArg = None) -> None:
    """Print several metric families from a single scrape as a JSON object.

    Args:
        names: Metric family names
    """
    with exit_on_error(title="Error Reading Metrics"):
        families = _run(settings, lambda service: service.get_metrics(names))
        _print_json(
            {
                name: family.model_dump() if family is not None else None
                for name, family in families.items()
            }
        )


@app.command(name="families")
def families(settings: SettingsArg = None) -> None:
    """List every metric family with its type and sample count."""
    with exit_on_error(title="Error Listing Metrics"):
        result = _run(settings, lambda service: service.get_all_metrics())
        console.print(families_table(result))


@app.command(name="dashboard")
def dashboard(settings: SettingsArg = None) -> None:
    """Show the gatekeeper DNS and DHCP overview."""
    with exit_on_error(title="Error Building Dashboard"):
        summary = _run(settings, lambda service: service.get_dashboard())
        console.print(dashboard_renderables(summary))
