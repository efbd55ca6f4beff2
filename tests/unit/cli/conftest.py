# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

import pytest

from meetup_perf.common.logging import CustomRichHandler


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI installs its own root handlers; drop them after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, (CustomRichHandler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def raw_results_file(tmp_path):
    path = tmp_path / "ci-9.performance-results.raw.json"
    path.write_text(
        '{"frontend": {"timeToFirstByte": [900], "largestContentfulPaint": [2000, 2100], "lcpMinusTtfb": []}}'
    )
    return path


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep rich from wrapping long artifact paths in error panels."""
    monkeypatch.setenv("COLUMNS", "300")
