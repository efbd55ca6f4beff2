# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from meetup_perf.post_processors.aggregator import aggregate, aggregate_suite

__all__ = ["aggregate", "aggregate_suite"]
