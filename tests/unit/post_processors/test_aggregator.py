# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from meetup_perf.common.models import StatsBundle
from meetup_perf.post_processors import aggregate, aggregate_suite


class TestAggregator:
    def test_empty_series_are_omitted(self):
        curated = aggregate_suite({"timeToFirstByte": [900], "lcpMinusTtfb": []})
        assert list(curated) == ["timeToFirstByte"]

    def test_bundle_per_metric(self):
        curated = aggregate({"frontend": {"loaded": [40, 10, 30, 20]}})
        assert curated == {
            "frontend": {
                "loaded": StatsBundle(count=4, min=10, max=40, median=25, q25=10, q75=30)
            }
        }

    def test_suite_with_only_empty_series_is_kept(self):
        assert aggregate({"editor": {"loaded": []}}) == {"editor": {}}

    def test_input_is_not_modified(self):
        raw = {"frontend": {"loaded": [3, 1, 2]}}
        aggregate(raw)
        assert raw == {"frontend": {"loaded": [3, 1, 2]}}
