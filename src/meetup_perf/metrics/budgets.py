# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Fixed performance budgets for the Core Web Vitals."""

from types import MappingProxyType

from meetup_perf.common.constants import WARN_BUDGET_RATIO
from meetup_perf.common.enums import BudgetStatus

# Milliseconds, except cumulativeLayoutShift which is unitless.
BUDGETS = MappingProxyType(
    {
        "timeToFirstByte": 800,
        "firstContentfulPaint": 1800,
        "largestContentfulPaint": 2500,
        "cumulativeLayoutShift": 0.1,
    }
)


def get_budget(metric: str) -> int | float | None:
    return BUDGETS.get(metric)


def classify(median: float, budget: float) -> BudgetStatus:
    """Classify a median against a budget.

    Returns:
        PASS if median <= budget,
        WARN if median <= WARN_BUDGET_RATIO * budget,
        FAIL otherwise.
    """
    if median <= budget:
        return BudgetStatus.PASS
    if median <= budget * WARN_BUDGET_RATIO:
        return BudgetStatus.WARN
    return BudgetStatus.FAIL


def within_budget(median: float, budget: float) -> bool:
    """The strict budget test used for the PASS/FAIL line; the warn band does not count."""
    return median <= budget
