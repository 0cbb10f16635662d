# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any

from promview.common.promview_logger import (
    _DEBUG,
    _ERROR,
    _INFO,
    _TRACE,
    _WARNING,
    MessageT,
    PromViewLogger,
)


class PromViewLoggerMixin:
    """Mixin that gives a class `self.debug(...)`, `self.info(...)` and friends.

    The logger is named after the concrete class unless `logger_name` is passed.
    """

    def __init__(self, logger_name: str | None = None, **kwargs: Any) -> None:
        self._promview_logger = PromViewLogger(logger_name or self.__class__.__name__)
        super().__init__(**kwargs)

    @property
    def logger(self) -> PromViewLogger:
        return self._promview_logger

    @property
    def is_debug_enabled(self) -> bool:
        return self._promview_logger.is_debug_enabled

    @property
    def is_trace_enabled(self) -> bool:
        return self._promview_logger.is_trace_enabled

    def trace(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self._promview_logger.log(_TRACE, message, *args, **kwargs)

    def debug(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self._promview_logger.log(_DEBUG, message, *args, **kwargs)

    def info(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self._promview_logger.log(_INFO, message, *args, **kwargs)

    def warning(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self._promview_logger.log(_WARNING, message, *args, **kwargs)

    def error(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self._promview_logger.log(_ERROR, message, *args, **kwargs)

    def exception(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self._promview_logger.log(_ERROR, message, *args, **kwargs)
