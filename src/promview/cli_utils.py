# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel

from promview.common.exceptions import PromViewError


@contextmanager
def exit_on_error(
    title: str = "Error",
    exceptions: tuple[type[BaseException], ...] = (PromViewError,),
    console: Console | None = None,
) -> Iterator[None]:
    """Print a rich error panel and exit with status 1 when one of `exceptions` is raised."""
    try:
        yield
    except exceptions as e:
        console = console or Console(stderr=True)
        console.print(
            Panel(
                str(e) or type(e).__name__,
                title=title,
                title_align="left",
                border_style="red",
            )
        )
        sys.exit(1)
