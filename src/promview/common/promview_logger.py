# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger wrapper with a TRACE level and lazily evaluated messages.

Messages may be passed as a zero-argument callable, which is only invoked when
the level is enabled. This keeps expensive f-strings out of the hot path::

    _logger.debug(lambda: f"Parsed {len(families)} families")
"""

import logging
from collections.abc import Callable
from typing import Any

_TRACE = 5
_DEBUG = logging.DEBUG
_INFO = logging.INFO
_WARNING = logging.WARNING
_ERROR = logging.ERROR
_CRITICAL = logging.CRITICAL

logging.addLevelName(_TRACE, "TRACE")

MessageT = str | Callable[[], str]


class PromViewLogger:
    """Thin wrapper over `logging.Logger` adding TRACE and lazy messages."""

    def __init__(self, logger_name: str) -> None:
        self.logger_name = logger_name
        self._logger = logging.getLogger(logger_name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    @property
    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(_DEBUG)

    @property
    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(_TRACE)

    def log(self, level: int, message: MessageT, *args: Any, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if callable(message):
            message = message()
        # stacklevel=3 reports the caller of trace()/debug()/... rather than this wrapper
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, message, *args, **kwargs)

    def trace(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(_TRACE, message, *args, **kwargs)

    def debug(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(_DEBUG, message, *args, **kwargs)

    def info(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(_INFO, message, *args, **kwargs)

    def warning(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(_WARNING, message, *args, **kwargs)

    def error(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(_ERROR, message, *args, **kwargs)

    def exception(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(_ERROR, message, *args, **kwargs)

    def critical(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(_CRITICAL, message, *args, **kwargs)
