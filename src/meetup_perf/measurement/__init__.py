# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from meetup_perf.measurement.block import block_selector
from meetup_perf.measurement.collection import (
    LoadingDurations,
    WebVitalsSample,
    collect_or_default,
    collect_web_vitals,
)
from meetup_perf.measurement.recorder import (
    BLOCK_PERFORMANCE_SUITE,
    EDITOR_SUITE,
    FRONTEND_SUITE,
    SUITE_METRICS,
    SuiteRecorder,
)
from meetup_perf.measurement.server_timing import (
    ServerTimingResult,
    ServerTimingTracker,
    extract_server_timing,
    from_performance_entries,
    parse_server_timing,
)

__all__ = [
    "BLOCK_PERFORMANCE_SUITE",
    "EDITOR_SUITE",
    "FRONTEND_SUITE",
    "LoadingDurations",
    "SUITE_METRICS",
    "ServerTimingResult",
    "ServerTimingTracker",
    "SuiteRecorder",
    "WebVitalsSample",
    "block_selector",
    "collect_or_default",
    "collect_web_vitals",
    "extract_server_timing",
    "from_performance_entries",
    "parse_server_timing",
]
