# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Models for the samples flowing from tests into the reporter and the stats derived from them."""

from pathlib import Path
from typing import TypeAlias

from pydantic import ConfigDict, Field

from meetup_perf.common.constants import JSON_CONTENT_TYPE
from meetup_perf.common.enums import RunStatus
from meetup_perf.common.models.base_models import PerfBaseModel

SampleT: TypeAlias = int | float
SuiteResults: TypeAlias = dict[str, list[SampleT]]
"""Metric name -> ordered series of samples."""
RunResults: TypeAlias = dict[str, SuiteResults]
"""Suite name -> metric series for that suite."""


class StatsBundle(PerfBaseModel):
    """Summary statistics of one non-empty metric series."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=1, description="The number of samples in the series")
    min: SampleT = Field(..., description="The smallest sample")
    max: SampleT = Field(..., description="The largest sample")
    median: SampleT = Field(..., description="The conventional median of the series")
    q25: SampleT = Field(
        ..., description="The 25th percentile, using the nearest-rank method"
    )
    q75: SampleT = Field(
        ..., description="The 75th percentile, using the nearest-rank method"
    )


CuratedSuite: TypeAlias = dict[str, StatsBundle]
CuratedResults: TypeAlias = dict[str, CuratedSuite]


class Attachment(PerfBaseModel):
    """A named artifact attached to a finished test."""

    name: str = Field(..., description="The attachment name, e.g. 'frontend-results'")
    content_type: str = Field(
        default=JSON_CONTENT_TYPE, description="The MIME type of the body"
    )
    body: bytes | None = Field(default=None, description="The raw attachment body")


class SuitePayload(PerfBaseModel):
    """A decoded results attachment: the metric series one test reported for one suite."""

    model_config = ConfigDict(strict=True, frozen=True)

    suite_name: str = Field(..., min_length=1)
    metrics: SuiteResults = Field(default_factory=dict)


class RunSummary(PerfBaseModel):
    """What the reporter produced when the run completed."""

    run_id: str
    status: RunStatus
    raw_path: Path
    curated_path: Path
    curated: CuratedResults = Field(default_factory=dict)
