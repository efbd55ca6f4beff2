# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from meetup_perf.records.artifact_loader import (
    load_curated_results,
    load_raw_results,
    run_id_from_path,
)
from meetup_perf.records.attachments import (
    attachment_name_for,
    decode_payload,
    extract_payloads,
    is_results_attachment,
    suite_name_for,
)
from meetup_perf.records.sample_store import SampleStore

__all__ = [
    "SampleStore",
    "attachment_name_for",
    "decode_payload",
    "extract_payloads",
    "is_results_attachment",
    "load_curated_results",
    "load_raw_results",
    "run_id_from_path",
    "suite_name_for",
]
