# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest
from pydantic import ValidationError

from promview.common.config import MetricsDefaults, MetricsSettings
from promview.common.enums import PromViewLogLevel
from promview.common.exceptions import ConfigurationError


class TestMetricsSettings:
    """Test settings defaults, flags and source resolution."""

    def test_defaults(self):
        settings = MetricsSettings()

        assert settings.source == MetricsDefaults.SOURCE
        assert settings.environment == "dev"
        assert settings.timeout == MetricsDefaults.TIMEOUT
        assert settings.log_level == PromViewLogLevel.INFO

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("PROMVIEW_SOURCE", "http://gatekeeper.lan:8085/metrics")
        monkeypatch.setenv("PROMVIEW_TIMEOUT", "2.5")

        settings = MetricsSettings()

        assert settings.source == "http://gatekeeper.lan:8085/metrics"
        assert settings.timeout == 2.5

    def test_explicit_values_override_environment(self, monkeypatch):
        monkeypatch.setenv("PROMVIEW_SOURCE", "http://from-env/metrics")

        assert MetricsSettings(source="scrape.txt").source == "scrape.txt"

    def test_verbose_sets_debug(self):
        assert MetricsSettings(verbose=True).log_level == PromViewLogLevel.DEBUG

    def test_extra_verbose_sets_trace(self):
        settings = MetricsSettings(verbose=True, extra_verbose=True)

        assert settings.log_level == PromViewLogLevel.TRACE

    def test_log_folder_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PROMVIEW_LOG_FOLDER", str(tmp_path))

        assert MetricsSettings().log_folder == tmp_path

    def test_log_folder_defaults_to_none(self):
        assert MetricsSettings().log_folder is None

    def test_prod_derives_source_from_base_url(self):
        settings = MetricsSettings(environment="prod", base_url="https://gatekeeper.lan/")

        assert settings.source == "https://gatekeeper.lan/metrics"

    def test_prod_keeps_explicit_source(self):
        settings = MetricsSettings(
            environment="prod",
            base_url="https://gatekeeper.lan",
            source="http://other:9100/metrics",
        )

        assert settings.source == "http://other:9100/metrics"

    def test_prod_without_base_url_raises(self):
        with pytest.raises(ConfigurationError, match="base_url"):
            MetricsSettings(environment="prod")

    def test_empty_source_raises(self):
        with pytest.raises(ConfigurationError, match="must not be empty"):
            MetricsSettings(source="  ")

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_timeout_must_be_positive(self, timeout):
        with pytest.raises(ValidationError):
            MetricsSettings(timeout=timeout)

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            MetricsSettings(environment="staging")
