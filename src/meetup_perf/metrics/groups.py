# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Metric groupings and display units used by the console report."""

from meetup_perf.common.enums import MetricGroup

CORE_WEB_VITALS = (
    "timeToFirstByte",
    "firstContentfulPaint",
    "largestContentfulPaint",
    "cumulativeLayoutShift",
)
SERVER_TIMING_METRICS = ("wordpressTotal", "wordpressDb", "wordpressCache")
EDITOR_METRICS = ("blockInsertionTime", "blockRenderTime", "settingsPanelOpenTime")
# blockInsertionTime and blockRenderTime are reported under both the editor and the block group.
BLOCK_METRICS = ("blockInsertionTime", "blockRenderTime", "attributeEditTime")

NAMED_GROUPS: dict[MetricGroup, tuple[str, ...]] = {
    MetricGroup.CORE_WEB_VITALS: CORE_WEB_VITALS,
    MetricGroup.SERVER_TIMING: SERVER_TIMING_METRICS,
    MetricGroup.EDITOR: EDITOR_METRICS,
    MetricGroup.BLOCK: BLOCK_METRICS,
}

GROUP_TITLES: dict[MetricGroup, str] = {
    MetricGroup.CORE_WEB_VITALS: "Core Web Vitals",
    MetricGroup.SERVER_TIMING: "WordPress Server-Timing",
    MetricGroup.EDITOR: "Editor Performance",
    MetricGroup.BLOCK: "Block Performance",
    MetricGroup.OTHER: "Other Metrics",
}

UNITLESS_METRICS = frozenset({"cumulativeLayoutShift"})

# Case-sensitive on purpose: "domContentLoaded" gets ms, "loaded" does not.
TIME_NAME_MARKERS = ("Time", "Paint", "Response", "Loaded")

_NAMED_METRICS = frozenset(
    metric for metrics in NAMED_GROUPS.values() for metric in metrics
)


def is_named_metric(metric: str) -> bool:
    """Whether the metric belongs to one of the fixed groups (i.e. not "other")."""
    return metric in _NAMED_METRICS


def infer_metric_unit(metric: str) -> str:
    """Infer a display unit from a metric name: "ms" for time-like names, else no unit."""
    return "ms" if any(marker in metric for marker in TIME_NAME_MARKERS) else ""


def metric_unit(metric: str, group: MetricGroup) -> str:
    """Return the display unit of a metric as rendered within the given group."""
    if metric in UNITLESS_METRICS:
        return ""
    if group in (MetricGroup.SERVER_TIMING, MetricGroup.OTHER):
        return infer_metric_unit(metric)
    return "ms"


def group_metrics(metric_names) -> dict[MetricGroup, list[str]]:
    """Split the present metric names into report groups.

    Named groups keep their fixed order and may share metrics; the "other" group
    keeps the order in which the names were given.
    """
    present = list(metric_names)
    present_set = set(present)
    grouped = {
        group: [metric for metric in metrics if metric in present_set]
        for group, metrics in NAMED_GROUPS.items()
    }
    grouped[MetricGroup.OTHER] = [m for m in present if not is_named_metric(m)]
    return grouped
