# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Settings for where to scrape metrics from and how to log."""

from pathlib import Path
from typing import Annotated, Literal

from cyclopts import Parameter
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self

from promview.common.enums import PromViewLogLevel
from promview.common.exceptions import ConfigurationError


class MetricsDefaults:
    SOURCE = "http://localhost:8085/metrics"
    METRICS_PATH = "metrics"
    TIMEOUT = 10.0
    LOG_LEVEL = PromViewLogLevel.INFO
    LOG_FILE = "promview.log"


class MetricsSettings(BaseSettings):
    """Metrics source configuration with environment variable support."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_prefix="PROMVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def apply_flags(self) -> Self:
        if self.extra_verbose:
            self.log_level = PromViewLogLevel.TRACE
        elif self.verbose:
            self.log_level = PromViewLogLevel.DEBUG
        return self

    @model_validator(mode="after")
    def resolve_source(self) -> Self:
        """Point at the appliance's /metrics route when running against a prod base URL."""
        if "source" in self.model_fields_set:
            if not self.source.strip():
                raise ConfigurationError("Metrics source must not be empty")
            return self
        if self.environment == "prod":
            if not self.base_url:
                raise ConfigurationError(
                    "base_url is required when environment is 'prod' and no source is given"
                )
            self.source = f"{self.base_url.rstrip('/')}/{MetricsDefaults.METRICS_PATH}"
        return self

    source: Annotated[
        str,
        Field(description="URL of the /metrics endpoint, or a path to a saved scrape"),
        Parameter(name=("--source", "-s")),
    ] = MetricsDefaults.SOURCE

    environment: Annotated[
        Literal["dev", "prod"],
        Field(description="dev scrapes the local appliance, prod derives the URL from base_url"),
        Parameter(name="--environment"),
    ] = "dev"

    base_url: Annotated[
        str | None,
        Field(description="Base URL of the appliance (used when environment is prod)"),
        Parameter(name="--base-url"),
    ] = None

    timeout: Annotated[
        float,
        Field(description="Total request timeout in seconds", gt=0.0),
        Parameter(name=("--timeout", "-t")),
    ] = MetricsDefaults.TIMEOUT

    log_level: Annotated[
        PromViewLogLevel,
        Field(description="Logging level"),
        Parameter(name="--log-level"),
    ] = MetricsDefaults.LOG_LEVEL

    verbose: Annotated[
        bool,
        Field(description="Verbose mode (sets log level to DEBUG)"),
        Parameter(name=("--verbose", "-v")),
    ] = False

    extra_verbose: Annotated[
        bool,
        Field(description="Extra verbose mode (sets log level to TRACE)"),
        Parameter(name="--extra-verbose"),
    ] = False

    log_folder: Annotated[
        Path | None,
        Field(description=f"Also append log records to {MetricsDefaults.LOG_FILE} in this folder"),
        Parameter(name="--log-folder"),
    ] = None
