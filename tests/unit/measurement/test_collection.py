# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio

import pytest

from meetup_perf.measurement import (
    FRONTEND_SUITE,
    LoadingDurations,
    SuiteRecorder,
    WebVitalsSample,
    collect_or_default,
    collect_web_vitals,
)


async def value(result):
    return result


async def failing():
    raise RuntimeError("page closed")


async def hanging():
    await asyncio.sleep(60)
    return 1


class TestCollectOrDefault:
    @pytest.mark.asyncio
    async def test_returns_measurement(self):
        assert await collect_or_default(value(812.5), 0) == 812.5

    @pytest.mark.asyncio
    async def test_failure_returns_default(self):
        assert await collect_or_default(failing(), 0, name="timeToFirstByte") == 0

    @pytest.mark.asyncio
    async def test_timeout_returns_default(self):
        default = LoadingDurations()
        assert await collect_or_default(hanging(), default, timeout=0.01) is default


class TestLoadingDurations:
    def test_from_browser_payload(self):
        durations = LoadingDurations.model_validate(
            {"serverResponse": 120, "firstContentfulPaint": 900, "domContentLoaded": 1000, "loaded": 1500}
        )
        assert durations.server_response == 120
        assert durations.as_samples() == {
            "firstContentfulPaint": 900,
            "serverResponse": 120,
            "domContentLoaded": 1000,
            "loaded": 1500,
        }

    def test_defaults_are_zero(self):
        assert set(LoadingDurations().as_samples().values()) == {0}


class TestWebVitalsSample:
    def test_record_into_frontend_suite(self):
        sample = WebVitalsSample(
            time_to_first_byte=700,
            largest_contentful_paint=2000,
            cumulative_layout_shift=0.02,
            loading_durations=LoadingDurations(loaded=2500),
        )
        recorder = SuiteRecorder(FRONTEND_SUITE)
        sample.record_into(recorder)

        assert recorder.series("timeToFirstByte") == [700]
        assert recorder.series("largestContentfulPaint") == [2000]
        assert recorder.series("lcpMinusTtfb") == [1300]
        assert recorder.series("cumulativeLayoutShift") == [0.02]
        assert recorder.series("loaded") == [2500]
        assert recorder.series("serverResponse") == [0]

    @pytest.mark.asyncio
    async def test_collect_web_vitals_substitutes_defaults(self):
        sample = await collect_web_vitals(
            ttfb=value(650),
            lcp=failing(),
            cls=value(0.01),
            loading_durations=hanging(),
            timeout=0.01,
        )
        assert sample.time_to_first_byte == 650
        assert sample.largest_contentful_paint == 0
        assert sample.cumulative_layout_shift == 0.01
        assert sample.loading_durations == LoadingDurations()
        assert sample.lcp_minus_ttfb == -650

    @pytest.mark.asyncio
    async def test_collect_web_vitals(self):
        sample = await collect_web_vitals(
            value(600),
            value(1800),
            value(0.0),
            value({"serverResponse": 100, "loaded": 2000}),
        )
        assert sample.lcp_minus_ttfb == 1200
        assert sample.loading_durations.loaded == 2000
        assert sample.loading_durations.first_contentful_paint == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"loaded": None},
            {"loaded": "n/a"},
            ["loaded", 1500],
            "n/a",
        ],
    )
    async def test_invalid_loading_durations_fall_back_to_zero(self, payload):
        sample = await collect_web_vitals(
            value(600), value(1800), value(0.0), value(payload)
        )
        assert sample.loading_durations == LoadingDurations()
        assert sample.time_to_first_byte == 600

    @pytest.mark.asyncio
    async def test_non_numeric_measurements_fall_back_to_zero(self):
        sample = await collect_web_vitals(
            value(None), value("1800"), value(True), value({"loaded": 2000})
        )
        assert sample.time_to_first_byte == 0
        assert sample.largest_contentful_paint == 0
        assert sample.cumulative_layout_shift == 0
        assert sample.loading_durations.loaded == 2000
