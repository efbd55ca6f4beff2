# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Locators for the measured block's stable `data-testid` hooks."""

from meetup_perf.common.constants import MEETUP_BLOCK_SELECTOR, MEETUP_TEST_IDS


def block_selector(part: str = "root") -> str:
    """CSS selector of one part of the Meetup Info block.

    Example:
        >>> block_selector("date")
        '[data-testid="meetup-date"]'

    Raises:
        KeyError: If the block has no such part.
    """
    if part == "root":
        return MEETUP_BLOCK_SELECTOR
    return f'[data-testid="{MEETUP_TEST_IDS[part]}"]'
