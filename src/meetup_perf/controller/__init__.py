# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from meetup_perf.controller.performance_reporter import PerformanceReporter

__all__ = ["PerformanceReporter"]
