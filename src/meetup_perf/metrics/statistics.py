# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Summary statistics over metric series.

Functions:
- median(): conventional median (mean of the two central values for even lengths)
- percentile(): nearest-rank percentile, always one of the input samples
- stats(): the StatsBundle for a series, or None when the series is empty

None of these mutate their input; every call works on a sorted copy.
"""

import math
from collections.abc import Sequence

import numpy as np

from meetup_perf.common.models import SampleT, StatsBundle


def _sorted_copy(values: Sequence[SampleT]) -> np.ndarray:
    return np.sort(np.asarray(values, dtype=np.float64))


def median(values: Sequence[SampleT]) -> float:
    """Return the median of a non-empty series.

    Example:
        >>> median([5, 1, 3])
        3.0
        >>> median([1, 2, 3, 4])
        2.5
    """
    ordered = _sorted_copy(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return float(ordered[mid])
    return float((ordered[mid - 1] + ordered[mid]) / 2)


def percentile(values: Sequence[SampleT], p: float) -> float:
    """Return the p-th percentile (0-100) of a non-empty series using the nearest-rank method.

    The index is `ceil(p / 100 * n) - 1`, clamped at zero, so the result is always
    an element of the series. There is no interpolation between samples.

    Example:
        >>> percentile([10, 20, 30, 40], 25)
        10.0
    """
    ordered = _sorted_copy(values)
    index = max(0, math.ceil((p / 100) * len(ordered)) - 1)
    return float(ordered[index])


def stats(values: Sequence[SampleT]) -> StatsBundle | None:
    """Compute the StatsBundle of a series, or None if the series is empty."""
    if len(values) == 0:
        return None
    ordered = _sorted_copy(values)
    return StatsBundle(
        count=len(ordered),
        min=float(ordered[0]),
        max=float(ordered[-1]),
        median=median(values),
        q25=percentile(values, 25),
        q75=percentile(values, 75),
    )
