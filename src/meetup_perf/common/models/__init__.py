# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from meetup_perf.common.models.base_models import PerfBaseModel
from meetup_perf.common.models.results_models import (
    Attachment,
    CuratedResults,
    CuratedSuite,
    RunResults,
    RunSummary,
    SampleT,
    StatsBundle,
    SuitePayload,
    SuiteResults,
)

__all__ = [
    "Attachment",
    "CuratedResults",
    "CuratedSuite",
    "PerfBaseModel",
    "RunResults",
    "RunSummary",
    "SampleT",
    "StatsBundle",
    "SuitePayload",
    "SuiteResults",
]
