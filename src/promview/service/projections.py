# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shape a parsed scrape into the views returned by the query layer."""

import math

from promview.common.models import (
    HistogramBucket,
    HistogramResult,
    MetricSample,
    ParseResult,
)
from promview.common.promview_logger import PromViewLogger

_logger = PromViewLogger(__name__)

INF_BUCKET_BOUND = "+Inf"
BUCKET_SUFFIX = "_bucket"
SUM_SUFFIX = "_sum"
COUNT_SUFFIX = "_count"


def extract_scalar(families: ParseResult, name: str) -> float:
    """Value of the first sample of `name`, or 0.0 if the family is missing or empty."""
    family = families.get(name)
    if family is None or not family.samples:
        return 0.0
    return family.samples[0].value


def extract_counter_vec(families: ParseResult, name: str) -> list[MetricSample]:
    """Copies of every sample of `name` in exposition order, or [] if missing."""
    family = families.get(name)
    if family is None:
        return []
    return [sample.model_copy(deep=True) for sample in family.samples]


def _first_value_or_zero(families: ParseResult, name: str) -> float:
    # A NaN sum or count counts as absent
    value = extract_scalar(families, name)
    return 0.0 if math.isnan(value) else value


def extract_histogram(families: ParseResult, base_name: str) -> HistogramResult:
    """Build a histogram view from `<base>_bucket`, `<base>_sum` and `<base>_count`.

    Bucket counts are left cumulative. The +Inf bucket is dropped and the rest are
    sorted ascending by upper bound.
    """
    buckets: list[HistogramBucket] = []
    bucket_name = f"{base_name}{BUCKET_SUFFIX}"
    bucket_family = families.get(bucket_name)
    if bucket_family is not None:
        for sample in bucket_family.samples:
            le = sample.labels.get("le")
            if le == INF_BUCKET_BOUND:
                continue
            try:
                upper_bound = float(le)
            except (TypeError, ValueError):
                upper_bound = math.nan
            if math.isnan(upper_bound):
                _logger.debug(
                    lambda le=le: f"Skipping {bucket_name} bucket with invalid le label: {le!r}"
                )
                continue
            buckets.append(
                HistogramBucket(upper_bound=upper_bound, cumulative_count=sample.value)
            )
    buckets.sort(key=lambda bucket: bucket.upper_bound)

    total = _first_value_or_zero(families, f"{base_name}{SUM_SUFFIX}")
    count = _first_value_or_zero(families, f"{base_name}{COUNT_SUFFIX}")
    average = total / count if count > 0 else 0.0

    return HistogramResult(buckets=buckets, sum=total, count=count, average=average)
