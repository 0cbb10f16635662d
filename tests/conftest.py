# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Shared test configuration and fixtures for all test types.

ONLY ADD FIXTURES HERE THAT ARE USED IN ALL TEST TYPES.
DO NOT ADD FIXTURES THAT ARE ONLY USED IN A SPECIFIC TEST TYPE.
"""

import logging
import os

import pytest

from promview.common.logging import CustomRichHandler


@pytest.fixture(autouse=True)
def clean_promview_env(monkeypatch):
    """Keep PROMVIEW_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("PROMVIEW_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove handlers installed by setup_rich_logging and restore the root level."""
    root = logging.getLogger()
    level = root.level
    existing = set(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in existing and isinstance(
            handler, CustomRichHandler | logging.FileHandler
        ):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
