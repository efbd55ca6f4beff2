# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared test configuration and fixtures for all test types.

ONLY ADD FIXTURES HERE THAT ARE USED IN ALL TEST TYPES.
"""

import pytest

_REPORTER_ENV_VARS = (
    "WP_ARTIFACTS_PATH",
    "RESULTS_ID",
    "MEETUP_PERF_ARTIFACTS_PATH",
    "MEETUP_PERF_RESULTS_ID",
    "MEETUP_PERF_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolate_reporter_environment(monkeypatch):
    """Keep CI environment variables from leaking into reporter settings."""
    for name in _REPORTER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
