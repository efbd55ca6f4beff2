# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Best-effort extraction of Server-Timing data.

Server-Timing is optional: WordPress only emits it with the right plugins or
configuration. Extraction therefore never raises. It returns a
:class:`ServerTimingResult` that tells "the server does not send it"
(UNSUPPORTED) apart from "it was sent but could not be read" (FAULT).
"""

import re
from collections.abc import Iterable, Mapping

from pydantic import Field

from meetup_perf.common.constants import SERVER_TIMING_FAULT_WARN_THRESHOLD
from meetup_perf.common.enums import ServerTimingStatus
from meetup_perf.common.mixins import PerfLoggerMixin
from meetup_perf.common.models import PerfBaseModel
from meetup_perf.measurement.recorder import SuiteRecorder

SERVER_TIMING_HEADER = "server-timing"

# Server-Timing entry names as sent by WordPress -> report metric names
WORDPRESS_ALIASES = {
    "total": "wordpressTotal",
    "wp-total": "wordpressTotal",
    "wpDb": "wordpressDb",
    "wp-db": "wordpressDb",
    "wpCache": "wordpressCache",
    "wp-cache": "wordpressCache",
}  # fmt: skip

# Splits on a delimiter that is not inside a quoted string.
_ENTRY_PATTERN = re.compile(r'(?:[^,"]|"(?:[^"\\]|\\.)*")+')
_PARAM_PATTERN = re.compile(r'(?:[^;"]|"(?:[^"\\]|\\.)*")+')
_TOKEN_PATTERN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


class ServerTimingResult(PerfBaseModel):
    """The outcome of one extraction attempt."""

    status: ServerTimingStatus
    entries: dict[str, float] = Field(
        default_factory=dict, description="Entry name -> duration in milliseconds"
    )
    error: str | None = None

    @classmethod
    def unsupported(cls) -> "ServerTimingResult":
        return cls(status=ServerTimingStatus.UNSUPPORTED)

    @classmethod
    def fault(cls, error: str) -> "ServerTimingResult":
        return cls(status=ServerTimingStatus.FAULT, error=error)

    @property
    def is_available(self) -> bool:
        return self.status == ServerTimingStatus.AVAILABLE

    def wordpress_metrics(self) -> dict[str, float]:
        """Map WordPress entries onto the report's server-timing metrics.

        Zero durations are dropped, as WordPress reports 0 for timers it did not run.
        """
        metrics: dict[str, float] = {}
        for name, duration in self.entries.items():
            alias = WORDPRESS_ALIASES.get(name)
            if alias and duration:
                metrics[alias] = duration
        return metrics


def _parse_entry(entry: str) -> tuple[str, float]:
    name, *params = (p.strip() for p in _PARAM_PATTERN.findall(entry))
    if not _TOKEN_PATTERN.match(name):
        raise ValueError(f"invalid entry name {name!r}")
    duration = 0.0
    for param in params:
        key, _, value = param.partition("=")
        if key.strip().lower() == "dur":
            duration = float(value.strip().strip('"'))
    return name, duration


def parse_server_timing(header_value: str | None) -> ServerTimingResult:
    """Parse a Server-Timing header value, e.g. ``wp-total;dur=123.4, wp-db;dur=7``."""
    if header_value is None or not header_value.strip():
        return ServerTimingResult.unsupported()

    entries: dict[str, float] = {}
    try:
        for raw_entry in _ENTRY_PATTERN.findall(header_value):
            if not raw_entry.strip():
                continue
            name, duration = _parse_entry(raw_entry)
            entries[name] = duration
    except ValueError as e:
        return ServerTimingResult.fault(f"Malformed Server-Timing header: {e}")

    if not entries:
        return ServerTimingResult.unsupported()
    return ServerTimingResult(status=ServerTimingStatus.AVAILABLE, entries=entries)


def extract_server_timing(headers: Mapping[str, str] | None) -> ServerTimingResult:
    """Extract Server-Timing from response headers, looked up case-insensitively."""
    if not headers:
        return ServerTimingResult.unsupported()
    for key, value in headers.items():
        if key.lower() == SERVER_TIMING_HEADER:
            return parse_server_timing(value)
    return ServerTimingResult.unsupported()


def from_performance_entries(entries: Iterable[Mapping] | None) -> ServerTimingResult:
    """Build a result from browser `PerformanceServerTiming` entries ({name, duration})."""
    if entries is None:
        return ServerTimingResult.unsupported()
    parsed: dict[str, float] = {}
    try:
        for entry in entries:
            parsed[str(entry["name"])] = float(entry.get("duration", 0))
    except (KeyError, TypeError, ValueError) as e:
        return ServerTimingResult.fault(f"Malformed server timing entry: {e!r}")
    if not parsed:
        return ServerTimingResult.unsupported()
    return ServerTimingResult(status=ServerTimingStatus.AVAILABLE, entries=parsed)


class ServerTimingTracker(PerfLoggerMixin):
    """Records Server-Timing results into a suite, surfacing persistent faults.

    A fault is logged at debug level, except for the `warn_after`-th one in a
    row, which is logged once as a warning. Any successful or unsupported
    result resets the streak.
    """

    def __init__(
        self,
        recorder: SuiteRecorder,
        warn_after: int = SERVER_TIMING_FAULT_WARN_THRESHOLD,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._recorder = recorder
        self._warn_after = warn_after
        self._consecutive_faults = 0

    @property
    def consecutive_faults(self) -> int:
        return self._consecutive_faults

    def record(self, result: ServerTimingResult) -> int:
        """Record the result's samples and return how many were recorded."""
        if result.status == ServerTimingStatus.FAULT:
            self._consecutive_faults += 1
            if self._consecutive_faults == self._warn_after:
                self.warning(
                    f"Server-Timing extraction failed {self._consecutive_faults} times in a row: {result.error}"
                )
            else:
                self.debug(lambda: f"Server-Timing extraction failed: {result.error}")
            return 0

        self._consecutive_faults = 0
        if result.status == ServerTimingStatus.UNSUPPORTED:
            self.trace("No Server-Timing data available")
            return 0

        samples = {**result.entries, **result.wordpress_metrics()}
        self._recorder.record_many(samples)
        return len(samples)
