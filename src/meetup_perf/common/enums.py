# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from enum import Enum


class CaseInsensitiveStrEnum(str, Enum):
    """
    CaseInsensitiveStrEnum is a custom enumeration class that extends `str` and `Enum` to provide case-insensitive
    lookup functionality for its members.
    """

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.value.lower() == other.lower()
        if isinstance(other, Enum):
            return self.value.lower() == str(other.value).lower()
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self.value.lower())

    @classmethod
    def _missing_(cls, value):
        """Resolve a member from a string value regardless of case."""
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class RunStatus(CaseInsensitiveStrEnum):
    """The overall outcome of a test run, as reported by the test framework."""

    PASSED = "passed"
    """Every test passed."""

    FAILED = "failed"
    """At least one test failed, or the run ended with an error."""

    TIMED_OUT = "timedout"
    """The run hit its global timeout."""

    INTERRUPTED = "interrupted"
    """The run was interrupted by the user or a signal."""


class BudgetStatus(CaseInsensitiveStrEnum):
    """Classification of a metric median against its budget."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"

    @property
    def glyph(self) -> str:
        return _BUDGET_GLYPHS[self]


_BUDGET_GLYPHS = {
    BudgetStatus.PASS: "✅",
    BudgetStatus.WARN: "⚠️",
    BudgetStatus.FAIL: "❌",
}


class MetricGroup(CaseInsensitiveStrEnum):
    """The report sections metrics are rendered under, in display order."""

    CORE_WEB_VITALS = "core_web_vitals"
    SERVER_TIMING = "server_timing"
    EDITOR = "editor"
    BLOCK = "block"
    OTHER = "other"


class ServerTimingStatus(CaseInsensitiveStrEnum):
    """Outcome of extracting Server-Timing entries from a response."""

    AVAILABLE = "available"
    """At least one entry was parsed."""

    UNSUPPORTED = "unsupported"
    """The response carried no Server-Timing data. Not an error."""

    FAULT = "fault"
    """The header was present but could not be parsed."""
