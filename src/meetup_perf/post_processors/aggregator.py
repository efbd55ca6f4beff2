# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Turn raw run results into curated per-metric statistics."""

from meetup_perf.common.models import CuratedResults, CuratedSuite, RunResults, SuiteResults
from meetup_perf.metrics.statistics import stats


def aggregate_suite(suite: SuiteResults) -> CuratedSuite:
    """Compute the StatsBundle of every non-empty series; empty series are omitted."""
    curated: CuratedSuite = {}
    for metric, series in suite.items():
        bundle = stats(series)
        if bundle is not None:
            curated[metric] = bundle
    return curated


def aggregate(run_results: RunResults) -> CuratedResults:
    """Compute curated results for every suite.

    A suite whose series are all empty is kept as an empty mapping.
    """
    return {suite: aggregate_suite(metrics) for suite, metrics in run_results.items()}
