# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import copy
import threading

from meetup_perf.common.mixins import PerfLoggerMixin
from meetup_perf.common.models import RunResults, SuitePayload, SuiteResults


class SampleStore(PerfLoggerMixin):
    """Accumulates the raw metric series of one test run.

    Merging is last-write-wins per metric name: a payload replaces the whole
    series of every metric it names and leaves the suite's other metrics alone.
    Series are never concatenated. Each merge happens under a lock, so merges
    from concurrently finishing tests are atomic with respect to readers.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._results: RunResults = {}
        self._lock = threading.Lock()

    def merge(self, payload: SuitePayload) -> None:
        with self._lock:
            suite = self._results.setdefault(payload.suite_name, {})
            for metric, series in payload.metrics.items():
                suite[metric] = list(series)
        self.debug(
            lambda: f"Merged {len(payload.metrics)} metric(s) into suite '{payload.suite_name}'"
        )

    def suite(self, suite_name: str) -> SuiteResults:
        """Return a copy of one suite's series, empty if the suite is unknown."""
        with self._lock:
            return copy.deepcopy(self._results.get(suite_name, {}))

    def snapshot(self) -> RunResults:
        """Return a deep copy of everything accumulated so far."""
        with self._lock:
            return copy.deepcopy(self._results)

    @property
    def suite_names(self) -> list[str]:
        with self._lock:
            return list(self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
