# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class PromViewError(Exception):
    """Base class for all exceptions raised by promview."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class ConfigurationError(PromViewError):
    """Exception raised when something fails to configure, or there is a configuration error."""


class MetricsFetchError(PromViewError):
    """Exception raised when the metrics text could not be retrieved from its source.

    The message carries the human-readable reason (for HTTP sources, the response
    status text).
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.url = url
