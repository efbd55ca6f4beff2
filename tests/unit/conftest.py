# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for the meetup_perf unit tests.

This file contains fixtures that are automatically discovered by pytest
and made available to test functions in the same directory and subdirectories.
"""

import io
from collections.abc import Callable

import orjson
import pytest
from rich.console import Console

from meetup_perf.common.environment import ReporterSettings
from meetup_perf.common.models import Attachment
from meetup_perf.exporters import ExporterConfig

TEST_RUN_ID = "test-run"


@pytest.fixture
def results_attachment() -> Callable[..., Attachment]:
    """Factory for `<suite>-results` JSON attachments."""

    def _make(suite: str = "frontend", payload=None, **metrics) -> Attachment:
        body = payload if payload is not None else metrics
        return Attachment(
            name=f"{suite}-results",
            content_type="application/json",
            body=body if isinstance(body, bytes) else orjson.dumps(body),
        )

    return _make


@pytest.fixture
def reporter_settings(tmp_path) -> ReporterSettings:
    return ReporterSettings(artifacts_path=tmp_path / "artifacts", results_id=TEST_RUN_ID)


@pytest.fixture
def exporter_config(tmp_path) -> ExporterConfig:
    return ExporterConfig(artifacts_path=tmp_path / "artifacts", run_id=TEST_RUN_ID)


@pytest.fixture
def report_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def report_console(report_output: io.StringIO) -> Console:
    """A plain-text console capturing the report."""
    return Console(file=report_output, width=200, color_system=None)
