# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Test-side accumulation of metric samples for one suite."""

import orjson

from meetup_perf.common.constants import JSON_CONTENT_TYPE
from meetup_perf.common.models import Attachment, SampleT, SuiteResults
from meetup_perf.records.attachments import attachment_name_for

FRONTEND_SUITE = "frontend"
EDITOR_SUITE = "editor"
BLOCK_PERFORMANCE_SUITE = "block-performance"

# Metrics each known suite reports, pre-declared so they show up in the raw
# artifact even when no sample was collected.
SUITE_METRICS: dict[str, tuple[str, ...]] = {
    FRONTEND_SUITE: (
        "timeToFirstByte",
        "largestContentfulPaint",
        "lcpMinusTtfb",
        "cumulativeLayoutShift",
        "firstContentfulPaint",
        "serverResponse",
        "domContentLoaded",
        "loaded",
    ),
    EDITOR_SUITE: (
        "serverResponse",
        "firstContentfulPaint",
        "domContentLoaded",
        "loaded",
        "blockInsertionTime",
        "blockRenderTime",
        "settingsPanelOpenTime",
    ),
    BLOCK_PERFORMANCE_SUITE: (
        "blockInsertionTime",
        "blockRenderTime",
        "attributeEditTime",
    ),
}


class SuiteRecorder:
    """Collects the samples of one suite across the iterations of a test module.

    Example:
        >>> recorder = SuiteRecorder("block-performance")
        >>> recorder.record("blockInsertionTime", 41.5)
        >>> recorder.attachment_name
        'block-performance-results'
    """

    def __init__(self, name: str, metrics: tuple[str, ...] | None = None) -> None:
        if not name:
            raise ValueError("Suite name cannot be empty")
        self.name = name
        declared = SUITE_METRICS.get(name, ()) if metrics is None else metrics
        self._series: SuiteResults = {metric: [] for metric in declared}

    @property
    def attachment_name(self) -> str:
        return attachment_name_for(self.name)

    def record(self, metric: str, value: SampleT) -> None:
        """Append a sample, creating the metric's series on first use."""
        self._series.setdefault(metric, []).append(value)

    def record_many(self, samples: dict[str, SampleT]) -> None:
        for metric, value in samples.items():
            self.record(metric, value)

    def series(self, metric: str) -> list[SampleT]:
        return list(self._series.get(metric, []))

    def to_dict(self) -> SuiteResults:
        return {metric: list(values) for metric, values in self._series.items()}

    def to_attachment(self) -> Attachment:
        return Attachment(
            name=self.attachment_name,
            content_type=JSON_CONTENT_TYPE,
            body=orjson.dumps(self._series, option=orjson.OPT_INDENT_2),
        )

    def __repr__(self) -> str:
        return f"SuiteRecorder(name={self.name!r}, metrics={len(self._series)})"
