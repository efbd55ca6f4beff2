# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from meetup_perf.common.constants import (
    CURATED_RESULTS_FILE_SUFFIX,
    RAW_RESULTS_FILE_SUFFIX,
)

_UNSAFE_RUN_ID_CHARS = re.compile(r"[:.]")


def timestamp_run_id(now: datetime | None = None) -> str:
    """An ISO-8601 UTC timestamp with millisecond precision, safe to use in file names.

    Example:
        >>> timestamp_run_id(datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc))
        '2025-01-02T03-04-05-678Z'
    """
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    iso = now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
    return _UNSAFE_RUN_ID_CHARS.sub("-", iso)


def resolve_run_id(override: str | None = None) -> str:
    """Use the explicit run id if one was configured, else a fresh timestamp."""
    return override or timestamp_run_id()


@dataclass(frozen=True)
class ExporterConfig:
    artifacts_path: Path
    run_id: str

    @property
    def raw_file_path(self) -> Path:
        return self.artifacts_path / f"{self.run_id}{RAW_RESULTS_FILE_SUFFIX}"

    @property
    def curated_file_path(self) -> Path:
        return self.artifacts_path / f"{self.run_id}{CURATED_RESULTS_FILE_SUFFIX}"


@dataclass
class FileExportInfo:
    export_type: str
    file_path: Path
