# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Loading of previously written results artifacts."""

from pathlib import Path

import orjson
from pydantic import TypeAdapter, ValidationError

from meetup_perf.common.constants import (
    CURATED_RESULTS_FILE_SUFFIX,
    RAW_RESULTS_FILE_SUFFIX,
)
from meetup_perf.common.exceptions import ArtifactReadError
from meetup_perf.common.models import CuratedResults, RunResults

_RAW_RESULTS_ADAPTER = TypeAdapter(RunResults)
_CURATED_RESULTS_ADAPTER = TypeAdapter(CuratedResults)


def _read_json(path: Path):
    try:
        return orjson.loads(Path(path).read_bytes())
    except FileNotFoundError as e:
        raise ArtifactReadError(f"Results file {path} does not exist") from e
    except OSError as e:
        raise ArtifactReadError(f"Failed to read {path}: {e!r}") from e
    except orjson.JSONDecodeError as e:
        raise ArtifactReadError(f"{path} is not valid JSON: {e}") from e


def load_raw_results(path: Path) -> RunResults:
    """Load a `<runId>.performance-results.raw.json` artifact."""
    try:
        return _RAW_RESULTS_ADAPTER.validate_python(_read_json(path))
    except ValidationError as e:
        raise ArtifactReadError(f"{path} is not a raw results file: {e}") from e


def load_curated_results(path: Path) -> CuratedResults:
    """Load a `<runId>.performance-results.json` artifact."""
    try:
        return _CURATED_RESULTS_ADAPTER.validate_python(_read_json(path))
    except ValidationError as e:
        raise ArtifactReadError(f"{path} is not a curated results file: {e}") from e


def run_id_from_path(path: Path) -> str:
    """Recover the run id from an artifact file name.

    Example:
        >>> run_id_from_path(Path("ci-42.performance-results.raw.json"))
        'ci-42'
    """
    name = Path(path).name
    for suffix in (RAW_RESULTS_FILE_SUFFIX, CURATED_RESULTS_FILE_SUFFIX):
        if name.endswith(suffix):
            return name.removesuffix(suffix)
    return Path(path).stem
