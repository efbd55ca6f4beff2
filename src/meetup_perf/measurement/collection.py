# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Guarded collection of measurements from the external metrics collaborator.

A measurement that fails or hangs must not fail the test iteration: it is
replaced by a default value (0, or zeroed loading durations), which the
reports then show as an outlier.
"""

import asyncio
import numbers
from collections.abc import Awaitable
from typing import TypeVar

from pydantic import ConfigDict, Field, ValidationError

from meetup_perf.common.constants import DEFAULT_METRIC_TIMEOUT_SECONDS
from meetup_perf.common.models import PerfBaseModel, SampleT
from meetup_perf.common.perf_logger import PerfLogger
from meetup_perf.measurement.recorder import SuiteRecorder

_logger = PerfLogger(__name__)

T = TypeVar("T")


async def collect_or_default(
    measurement: Awaitable[T],
    default: T,
    timeout: float = DEFAULT_METRIC_TIMEOUT_SECONDS,
    name: str | None = None,
) -> T:
    """Await a measurement, returning `default` if it times out or raises."""
    try:
        return await asyncio.wait_for(measurement, timeout=timeout)
    except asyncio.TimeoutError:
        _logger.debug(lambda: f"Measurement {name or ''} timed out after {timeout}s")
    except Exception as e:
        _logger.debug(lambda: f"Measurement {name or ''} failed: {e!r}")
    return default


class LoadingDurations(PerfBaseModel):
    """Page loading milestones in milliseconds. All zero when collection failed."""

    model_config = ConfigDict(populate_by_name=True)

    first_contentful_paint: float = Field(default=0, alias="firstContentfulPaint")
    server_response: float = Field(default=0, alias="serverResponse")
    dom_content_loaded: float = Field(default=0, alias="domContentLoaded")
    loaded: float = Field(default=0, alias="loaded")

    def as_samples(self) -> dict[str, SampleT]:
        return self.model_dump(by_alias=True)


class WebVitalsSample(PerfBaseModel):
    """One frontend page load worth of measurements."""

    time_to_first_byte: float = 0
    largest_contentful_paint: float = 0
    cumulative_layout_shift: float = 0
    loading_durations: LoadingDurations = Field(default_factory=LoadingDurations)

    @property
    def lcp_minus_ttfb(self) -> float:
        """Render time after the server responded."""
        return self.largest_contentful_paint - self.time_to_first_byte

    def record_into(self, recorder: SuiteRecorder) -> None:
        recorder.record("timeToFirstByte", self.time_to_first_byte)
        recorder.record("largestContentfulPaint", self.largest_contentful_paint)
        recorder.record("lcpMinusTtfb", self.lcp_minus_ttfb)
        recorder.record("cumulativeLayoutShift", self.cumulative_layout_shift)
        recorder.record_many(self.loading_durations.as_samples())


async def collect_web_vitals(
    ttfb: Awaitable[float],
    lcp: Awaitable[float],
    cls: Awaitable[float],
    loading_durations: Awaitable[dict],
    timeout: float = DEFAULT_METRIC_TIMEOUT_SECONDS,
) -> WebVitalsSample:
    """Collect one WebVitalsSample, substituting defaults for any failed measurement.

    The measurements are awaited one after another, matching how the browser
    is driven: each of them evaluates script in the same page.
    """
    time_to_first_byte = await collect_or_default(ttfb, 0, timeout, "timeToFirstByte")
    largest_contentful_paint = await collect_or_default(
        lcp, 0, timeout, "largestContentfulPaint"
    )
    cumulative_layout_shift = await collect_or_default(
        cls, 0, timeout, "cumulativeLayoutShift"
    )
    durations = await collect_or_default(
        loading_durations, None, timeout, "loadingDurations"
    )
    return WebVitalsSample(
        time_to_first_byte=_as_sample(time_to_first_byte, "timeToFirstByte"),
        largest_contentful_paint=_as_sample(
            largest_contentful_paint, "largestContentfulPaint"
        ),
        cumulative_layout_shift=_as_sample(
            cumulative_layout_shift, "cumulativeLayoutShift"
        ),
        loading_durations=_as_loading_durations(durations),
    )


def _as_sample(value, name: str) -> float:
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return float(value)
    _logger.debug(lambda: f"Measurement {name} returned {value!r}, using 0")
    return 0.0


def _as_loading_durations(durations) -> LoadingDurations:
    if not durations:
        return LoadingDurations()
    try:
        return LoadingDurations.model_validate(durations)
    except ValidationError as e:
        _logger.debug(lambda: f"Invalid loading durations {durations!r}: {e}")
        return LoadingDurations()
