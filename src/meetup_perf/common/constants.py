# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

RESULTS_ATTACHMENT_SUFFIX = "-results"
"""Attachments whose name ends with this suffix carry a suite's results payload."""

JSON_CONTENT_TYPE = "application/json"

RAW_RESULTS_FILE_SUFFIX = ".performance-results.raw.json"
CURATED_RESULTS_FILE_SUFFIX = ".performance-results.json"

DEFAULT_ARTIFACTS_DIRECTORY = Path("artifacts") / "performance-results"
LOG_FOLDER = "logs"
LOG_FILE = "meetup_perf.log"

WARN_BUDGET_RATIO = 1.2
"""A metric whose median exceeds its budget by no more than this ratio is a warning."""

DEFAULT_METRIC_TIMEOUT_SECONDS = 10.0

SERVER_TIMING_FAULT_WARN_THRESHOLD = 3

REPORT_RULE_WIDTH = 60

MEETUP_TEST_IDS = {
    "root": "meetup-info",
    "title": "meetup-title",
    "details": "meetup-details",
    "date": "meetup-date",
    "location": "meetup-location",
}  # fmt: skip
MEETUP_BLOCK_SELECTOR = f'[data-testid="{MEETUP_TEST_IDS["root"]}"]'
