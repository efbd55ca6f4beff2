# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from pathlib import Path

from rich.console import Console

from meetup_perf.common.constants import REPORT_RULE_WIDTH
from meetup_perf.common.enums import MetricGroup, RunStatus
from meetup_perf.common.mixins import PerfLoggerMixin
from meetup_perf.common.models import CuratedResults, CuratedSuite, StatsBundle
from meetup_perf.metrics.budgets import classify, get_budget, within_budget
from meetup_perf.metrics.groups import GROUP_TITLES, group_metrics, metric_unit

# Wide enough to hold any finite float with its decimals.
_FIXED_CONTEXT = Context(prec=400)


def to_fixed(value: float, digits: int) -> str:
    """Format a number with a fixed number of decimals, rounding ties away from zero.

    Rounds the exact binary value like JavaScript's `toFixed`, so 1.625 gives
    "1.63" where the `f` format spec gives "1.62".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        value = 0.0
    quantum = Decimal(1).scaleb(-digits)
    fixed = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT)
    return str(fixed)


def format_spread(bundle: StatsBundle) -> str:
    """The interquartile spread as a percentage of the median, to one decimal.

    A zero median yields "NaN" (no spread) or "Infinity" rather than an error.
    """
    spread = bundle.q75 - bundle.q25
    if bundle.median == 0:
        return "NaN" if spread == 0 else ("Infinity" if spread > 0 else "-Infinity")
    return to_fixed(spread / bundle.median * 100, 1)


class ConsoleReportExporter(PerfLoggerMixin):
    """Renders curated results as a grouped, budget-annotated text summary."""

    TITLE = "=== Performance Results Summary ==="

    def __init__(
        self,
        curated: CuratedResults,
        status: RunStatus | str,
        raw_path: Path | None = None,
        curated_path: Path | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._curated = curated
        self._status = status
        self._raw_path = raw_path
        self._curated_path = curated_path

    async def export(self, console: Console) -> None:
        self.print_report(console)

    def print_report(self, console: Console) -> None:
        for line in self.render_lines():
            console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
        console.file.flush()

    def render(self) -> str:
        return "\n".join(self.render_lines())

    def render_lines(self) -> list[str]:
        lines = ["", self.TITLE, f"Status: {self._status}", ""]
        for suite, metrics in self._curated.items():
            lines.extend(self._render_suite(suite, metrics))

        lines.extend(["", "═" * REPORT_RULE_WIDTH])
        if self._raw_path is not None:
            lines.append(f"Raw results: {self._raw_path}")
        if self._curated_path is not None:
            lines.append(f"Curated results: {self._curated_path}")
        return lines

    def _render_suite(self, suite: str, metrics: CuratedSuite) -> list[str]:
        lines = ["", f"{suite}:", "─" * REPORT_RULE_WIDTH]
        for group, names in group_metrics(metrics).items():
            if not names:
                continue
            lines.extend(["", f"{GROUP_TITLES[group]}:"])
            for metric in names:
                lines.extend(self._render_metric(metric, metrics[metric], group))
        return lines

    def _render_metric(
        self, metric: str, bundle: StatsBundle, group: MetricGroup
    ) -> list[str]:
        unit = metric_unit(metric, group)
        budget = get_budget(metric)
        summary = (
            f"{metric}: {to_fixed(bundle.median, 2)}{unit} "
            f"({to_fixed(bundle.min, 2)}-{to_fixed(bundle.max, 2)}, IQR: ±{format_spread(bundle)}%)"
        )
        if budget is None:
            return [f"  {summary}"]

        glyph = classify(bundle.median, budget).glyph
        verdict = "PASS" if within_budget(bundle.median, budget) else "FAIL"
        return [
            f"  {glyph} {summary}",
            f"    Budget: {budget}{unit}, Status: {verdict}",
        ]
