# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Implementations behind the `meetup-perf` commands."""

import asyncio
from pathlib import Path

from rich.console import Console

from meetup_perf.common.constants import LOG_FOLDER
from meetup_perf.common.enums import RunStatus
from meetup_perf.common.environment import load_settings
from meetup_perf.common.logging import setup_rich_logging
from meetup_perf.common.models import CuratedResults
from meetup_perf.common.perf_logger import PerfLogger
from meetup_perf.exporters import (
    ConsoleReportExporter,
    CuratedResultsJsonExporter,
    ExporterConfig,
)
from meetup_perf.post_processors import aggregate
from meetup_perf.records import load_curated_results, load_raw_results, run_id_from_path

_logger = PerfLogger(__name__)


def run_report(
    curated_file: Path,
    status: RunStatus | str = RunStatus.PASSED,
    console: Console | None = None,
) -> CuratedResults:
    """Render the report for a curated results file."""
    setup_rich_logging(load_settings().log_level)
    curated = load_curated_results(curated_file)
    _logger.debug(lambda: f"Loaded {len(curated)} suites from {curated_file}")
    ConsoleReportExporter(
        curated, RunStatus(status), curated_path=curated_file
    ).print_report(console or Console())
    return curated


def run_aggregate(
    raw_file: Path,
    output_dir: Path | None = None,
    status: RunStatus | str = RunStatus.PASSED,
    console: Console | None = None,
) -> Path:
    """Recompute curated statistics for a raw results file and render the report.

    The curated artifact is written under the raw file's run id, next to it
    unless `output_dir` is given. Returns the curated file path.
    """
    output_dir = Path(output_dir) if output_dir else Path(raw_file).parent
    setup_rich_logging(load_settings().log_level, output_dir / LOG_FOLDER)

    raw_results = load_raw_results(raw_file)
    config = ExporterConfig(artifacts_path=output_dir, run_id=run_id_from_path(raw_file))
    curated = aggregate(raw_results)
    curated_path = asyncio.run(CuratedResultsJsonExporter(config, curated).export())
    _logger.info(f"Wrote curated results to {curated_path}")

    ConsoleReportExporter(
        curated, RunStatus(status), raw_path=raw_file, curated_path=curated_path
    ).print_report(console or Console())
    return curated_path
