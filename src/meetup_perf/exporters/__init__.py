# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from meetup_perf.exporters.artifact_exporter import (
    ArtifactBaseExporter,
    CuratedResultsJsonExporter,
    RawResultsJsonExporter,
)
from meetup_perf.exporters.console_report_exporter import (
    ConsoleReportExporter,
    format_spread,
    to_fixed,
)
from meetup_perf.exporters.exporter_config import (
    ExporterConfig,
    FileExportInfo,
    resolve_run_id,
    timestamp_run_id,
)

__all__ = [
    "ArtifactBaseExporter",
    "ConsoleReportExporter",
    "CuratedResultsJsonExporter",
    "ExporterConfig",
    "FileExportInfo",
    "RawResultsJsonExporter",
    "format_spread",
    "resolve_run_id",
    "timestamp_run_id",
    "to_fixed",
]
