# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import math

import orjson
import pytest

from promview.common.enums import PrometheusMetricType
from promview.common.models import HistogramResult, MetricFamily, MetricSample


class TestMetricFamily:
    """Test the family model."""

    def test_defaults(self):
        family = MetricFamily()

        assert family.help == ""
        assert family.type == ""
        assert family.samples == []

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("counter", PrometheusMetricType.COUNTER),
            ("gauge", PrometheusMetricType.GAUGE),
            ("histogram", PrometheusMetricType.HISTOGRAM),
            ("summary", PrometheusMetricType.SUMMARY),
            ("untyped", PrometheusMetricType.UNTYPED),
            ("GAUGE", PrometheusMetricType.GAUGE),
            ("", PrometheusMetricType.UNTYPED),
            ("info", PrometheusMetricType.UNTYPED),
        ],
    )
    def test_metric_type(self, raw, expected):
        assert MetricFamily(type=raw).metric_type == expected

    def test_type_stays_verbatim(self):
        assert MetricFamily(type="GAUGE").type == "GAUGE"


class TestSerialization:
    """Test JSON output of the models."""

    def test_nan_sample_is_allowed(self):
        assert math.isnan(MetricSample(value=math.nan).value)

    def test_family_dump(self):
        family = MetricFamily(
            help="count of active leases",
            type="gauge",
            samples=[MetricSample(value=3.0)],
        )

        assert orjson.loads(orjson.dumps(family.model_dump())) == {
            "help": "count of active leases",
            "type": "gauge",
            "samples": [{"labels": {}, "value": 3.0}],
        }

    def test_histogram_defaults(self):
        assert HistogramResult().model_dump() == {
            "buckets": [],
            "sum": 0.0,
            "count": 0.0,
            "average": 0.0,
        }
