# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class PerfBaseModel(BaseModel):
    """Base model for all meetup_perf pydantic models."""

    model_config = ConfigDict(arbitrary_types_allowed=True)
