# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for meetup-perf."""

################################################################################
# NOTE: Keep the imports here to a minimum. This file is read every time
# the CLI is run, including to generate the help text.
################################################################################

from pathlib import Path

from cyclopts import App

from meetup_perf.cli_utils import exit_on_error
from meetup_perf.common.enums import RunStatus

app = App(name="meetup-perf", help="Performance results reporting for the Meetup block")


@app.command(name="report")
def report(curated_file: Path, status: RunStatus = RunStatus.PASSED) -> None:
    """Print the performance summary of a curated results file.

    Args:
        curated_file: Path to a `<runId>.performance-results.json` file.
        status: Run status shown in the report header.
    """
    with exit_on_error(title="Error Rendering Performance Report"):
        from meetup_perf.cli_runner import run_report

        run_report(curated_file, status)


@app.command(name="aggregate")
def aggregate(
    raw_file: Path,
    output_dir: Path | None = None,
    status: RunStatus = RunStatus.PASSED,
) -> None:
    """Recompute curated statistics from a raw results file and print the summary.

    Args:
        raw_file: Path to a `<runId>.performance-results.raw.json` file.
        output_dir: Directory for the curated file. Defaults to the raw file's directory.
        status: Run status shown in the report header.
    """
    with exit_on_error(title="Error Aggregating Performance Results"):
        from meetup_perf.cli_runner import run_aggregate

        run_aggregate(raw_file, output_dir, status)
