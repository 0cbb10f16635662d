# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich renderables for query results."""

import math

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from promview.common.models import (
    DashboardSummary,
    HistogramResult,
    MetricSample,
    ParseResult,
)
from promview.service.dashboard import top_samples

DASHBOARD_TOP_N = 10


def format_value(value: float) -> str:
    """Format a sample value, printing integral values without a fraction."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}"


def _format_labels(labels: dict[str, str]) -> str:
    return ", ".join(f'{key}="{value}"' for key, value in labels.items())


def counter_vec_table(title: str, samples: list[MetricSample]) -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column("Labels", style="cyan")
    table.add_column("Value", justify="right", style="green")
    for sample in samples:
        table.add_row(Text(_format_labels(sample.labels)), format_value(sample.value))
    if not samples:
        table.add_row(Text("no samples", style="dim"), "")
    return table


def histogram_table(title: str, histogram: HistogramResult) -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column("le", justify="right", style="cyan")
    table.add_column("Cumulative count", justify="right", style="green")
    for bucket in histogram.buckets:
        table.add_row(format_value(bucket.upper_bound), format_value(bucket.cumulative_count))
    table.add_section()
    table.add_row("sum", format_value(histogram.sum))
    table.add_row("count", format_value(histogram.count))
    table.add_row("average", format_value(histogram.average))
    return table


def families_table(families: ParseResult) -> Table:
    table = Table(title="Metric families", title_justify="left")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Samples", justify="right")
    table.add_column("Help", style="dim")
    for name, family in families.items():
        table.add_row(
            Text(name), Text(family.type), str(len(family.samples)), Text(family.help)
        )
    return table


def dashboard_renderables(summary: DashboardSummary) -> RenderableType:
    """Group of tables for the gatekeeper overview."""
    parts: list[RenderableType] = [
        Text.assemble(
            ("Active leases: ", "bold"), format_value(summary.active_leases)
        ),
        histogram_table("DNS request time (ms)", summary.dns_latency),
        histogram_table("DHCP request time (ms)", summary.dhcp_latency),
    ]
    for name, samples in summary.counters.items():
        parts.append(
            counter_vec_table(
                f"{name} (top {DASHBOARD_TOP_N})",
                top_samples(samples, DASHBOARD_TOP_N),
            )
        )
    return Group(*parts)
