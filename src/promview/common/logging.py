# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console logging for the promview CLI.

Usage::

    from promview.common.logging import setup_rich_logging

    setup_rich_logging(settings)
"""

import logging
import re
from datetime import datetime
from pathlib import Path

from rich.console import Console, ConsoleRenderable, Group
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.text import Span, Text
from rich.traceback import Traceback

from promview.common.config import MetricsDefaults, MetricsSettings
from promview.common.promview_logger import PromViewLogger

_logger = PromViewLogger(__name__)

LOG_FILE = MetricsDefaults.LOG_FILE
FILE_LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s:%(lineno)d %(message)s"
FILE_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
MAX_CONSOLE_MESSAGE_LENGTH = 4096


def setup_rich_logging(settings: MetricsSettings) -> None:
    """Set up rich logging with appropriate configuration.

    Records go to stderr, and are also appended to `settings.log_folder/promview.log`
    when a log folder is configured.
    """
    # Set logging level for the root logger (affects all loggers)
    level = str(settings.log_level).upper()
    logging.root.setLevel(level)

    # Remove all existing handlers to avoid duplicate logs
    for existing_handler in logging.root.handlers[:]:
        logging.root.removeHandler(existing_handler)

    rich_handler = CustomRichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=Console(stderr=True),
        show_time=False,
        show_level=False,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    logging.root.addHandler(rich_handler)

    if settings.log_folder is not None:
        logging.root.addHandler(create_file_handler(settings.log_folder, level))

    _logger.debug(lambda: f"Logging initialized with level: {level}")


def create_file_handler(log_folder: Path, level: str | int) -> logging.FileHandler:
    """Append plain-text records to `<log_folder>/promview.log`, creating the folder."""
    log_folder.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_folder / LOG_FILE, mode="a", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(FILE_LOG_FORMAT, datefmt=FILE_LOG_DATE_FORMAT)
    )
    return handler


class LogHighlighter(RegexHighlighter):
    """Lightweight highlighter for log messages.

    Highlights URLs, paths, numbers, quoted strings, booleans and key=value
    pairs using a single combined regex.
    """

    base_style = "repr."

    _MEGA_PATTERN = re.compile(
        r"(?P<url>(?:https?|file)://[^\s\]\)'\"]+)"  # URLs
        r"|(?P<path>(?<![/\w.~])(?:/[\w._-]+)+/?)"  # Unix paths
        r"|(?P<number>(?<![.\w])-?\d+\.?\d*(?:e[+-]?\d+)?\b)"  # Numbers
        r"|(?P<str>\"[^\"]*\"|'[^']*')"  # Quoted strings
        r"|\b(?P<bool_true>True)\b|\b(?P<bool_false>False)\b|\b(?P<none>None)\b"  # Booleans
        r"|(?P<brace>[\[\](){}])"  # Brackets
        r"|\b(?P<attrib_name>\w+)=(?P<attrib_value>[^\s,=\[\](){}]+)?"  # key=value
    )  # fmt: skip

    highlights = [_MEGA_PATTERN]

    def highlight(self, text: Text) -> None:
        """Apply highlighting in place with one finditer pass."""
        plain = text.plain
        prefix = self.base_style

        for match in self._MEGA_PATTERN.finditer(plain):
            for name, value in match.groupdict().items():
                if value is not None:
                    start, end = match.span(name)
                    if start != -1:
                        text.spans.append(Span(start, end, f"{prefix}{name}"))


class CustomRichHandler(RichHandler):
    """Rich logging handler rendering one compact line per record.

    Example Output::

        12:26:52.092 INFO     Fetched 18342 bytes from http://gatekeeper:8085/metrics (HttpMetricsFetcher:61)
        12:26:52.095 DEBUG    Parsed 42 metric families (promview.parser.exposition_parser:118)
    """

    LOG_LEVEL_STYLES = {
        "TRACE": "dim",
        "DEBUG": "dim",
        "INFO": "cyan",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.highlighter = LogHighlighter()

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        """Render a record as `HH:MM:SS.mmm LEVEL    message (logger:lineno)`.

        Args:
            record: The log record containing message, level, logger name, etc.
            traceback: Optional Rich Traceback to append after the log message.
            message_renderable: Pre-rendered message (unused; we re-render from record).
        """
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        level_style = self.LOG_LEVEL_STYLES.get(record.levelname, "white")
        message = record.getMessage()[:MAX_CONSOLE_MESSAGE_LENGTH]

        highlighted = Text(message)
        self.highlighter.highlight(highlighted)

        formatted_log = Text.assemble(
            Text(f"{timestamp} ", style="log.time"),
            Text(f"{record.levelname:<8} ", style=level_style),
            highlighted,
            Text(f" ({record.name}:{record.lineno})", style="dim italic"),
        )

        return Group(formatted_log, traceback) if traceback else formatted_log
