# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from meetup_perf.common.enums import MetricGroup
from meetup_perf.metrics.groups import (
    group_metrics,
    infer_metric_unit,
    is_named_metric,
    metric_unit,
)


class TestGroupMetrics:
    def test_named_groups_keep_their_fixed_order(self):
        grouped = group_metrics(
            ["cumulativeLayoutShift", "wordpressDb", "timeToFirstByte", "wordpressTotal"]
        )
        assert grouped[MetricGroup.CORE_WEB_VITALS] == [
            "timeToFirstByte",
            "cumulativeLayoutShift",
        ]
        assert grouped[MetricGroup.SERVER_TIMING] == ["wordpressTotal", "wordpressDb"]

    def test_other_keeps_the_given_order(self):
        grouped = group_metrics(["loaded", "timeToFirstByte", "lcpMinusTtfb", "serverResponse"])
        assert grouped[MetricGroup.OTHER] == ["loaded", "lcpMinusTtfb", "serverResponse"]

    def test_block_metrics_appear_in_editor_and_block_groups(self):
        grouped = group_metrics(["blockInsertionTime", "attributeEditTime"])
        assert grouped[MetricGroup.EDITOR] == ["blockInsertionTime"]
        assert grouped[MetricGroup.BLOCK] == ["blockInsertionTime", "attributeEditTime"]
        assert grouped[MetricGroup.OTHER] == []

    def test_every_group_is_present(self):
        assert list(group_metrics([])) == [
            MetricGroup.CORE_WEB_VITALS,
            MetricGroup.SERVER_TIMING,
            MetricGroup.EDITOR,
            MetricGroup.BLOCK,
            MetricGroup.OTHER,
        ]

    @pytest.mark.parametrize(
        "metric,expected",
        [
            ("timeToFirstByte", True),
            ("wordpressCache", True),
            ("settingsPanelOpenTime", True),
            ("lcpMinusTtfb", False),
            ("wp-total", False),
        ],
    )  # fmt: skip
    def test_is_named_metric(self, metric, expected):
        assert is_named_metric(metric) is expected


class TestMetricUnit:
    @pytest.mark.parametrize(
        "metric,expected",
        [
            ("domContentLoaded", "ms"),
            ("serverResponse", "ms"),
            ("firstContentfulPaint", "ms"),
            ("blockRenderTime", "ms"),
            ("loaded", ""),
            ("lcpMinusTtfb", ""),
            ("wordpressTotal", ""),
        ],
    )  # fmt: skip
    def test_infer_metric_unit(self, metric, expected):
        assert infer_metric_unit(metric) == expected

    @pytest.mark.parametrize(
        "metric,group,expected",
        [
            ("cumulativeLayoutShift", MetricGroup.CORE_WEB_VITALS, ""),
            ("timeToFirstByte", MetricGroup.CORE_WEB_VITALS, "ms"),
            ("attributeEditTime", MetricGroup.BLOCK, "ms"),
            ("settingsPanelOpenTime", MetricGroup.EDITOR, "ms"),
            ("wordpressDb", MetricGroup.SERVER_TIMING, ""),
            ("domContentLoaded", MetricGroup.OTHER, "ms"),
            ("loaded", MetricGroup.OTHER, ""),
        ],
    )  # fmt: skip
    def test_metric_unit_by_group(self, metric, group, expected):
        assert metric_unit(metric, group) == expected
