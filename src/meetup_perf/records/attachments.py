# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""The boundary between test attachments and suite payloads.

Results attachments follow a naming convention: an attachment named
`<suite>-results` with a JSON content type carries `{metric: sample}` or
`{metric: [samples]}` for that suite. The convention is resolved here, once,
into an explicit :class:`SuitePayload`.
"""

import numbers
from collections.abc import Iterable

import orjson
from pydantic import ValidationError

from meetup_perf.common.constants import JSON_CONTENT_TYPE, RESULTS_ATTACHMENT_SUFFIX
from meetup_perf.common.exceptions import AttachmentDecodeError
from meetup_perf.common.models import Attachment, SuitePayload


def is_results_attachment(attachment: Attachment) -> bool:
    """Whether an attachment is a non-empty JSON results payload."""
    return (
        attachment.name.endswith(RESULTS_ATTACHMENT_SUFFIX)
        and attachment.content_type == JSON_CONTENT_TYPE
        and bool(attachment.body)
    )


def suite_name_for(attachment_name: str) -> str:
    """Strip the results suffix, e.g. 'block-performance-results' -> 'block-performance'."""
    return attachment_name.removesuffix(RESULTS_ATTACHMENT_SUFFIX)


def attachment_name_for(suite_name: str) -> str:
    return f"{suite_name}{RESULTS_ATTACHMENT_SUFFIX}"


def _is_sample(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def decode_payload(attachment: Attachment) -> SuitePayload:
    """Decode a results attachment into a SuitePayload.

    Scalar samples are normalized into one-element series.

    Raises:
        AttachmentDecodeError: If the body is not a JSON object of numbers or number lists.
    """
    try:
        data = orjson.loads(attachment.body or b"")
    except orjson.JSONDecodeError as e:
        raise AttachmentDecodeError(attachment.name, f"body is not valid JSON ({e})") from e

    if not isinstance(data, dict):
        raise AttachmentDecodeError(
            attachment.name, f"expected a JSON object, got {type(data).__name__}"
        )

    metrics: dict[str, list] = {}
    for metric, value in data.items():
        series = value if isinstance(value, list) else [value]
        if not all(_is_sample(sample) for sample in series):
            raise AttachmentDecodeError(
                attachment.name, f"metric '{metric}' contains non-numeric samples"
            )
        metrics[metric] = list(series)

    try:
        return SuitePayload(suite_name=suite_name_for(attachment.name), metrics=metrics)
    except ValidationError as e:
        raise AttachmentDecodeError(attachment.name, str(e)) from e


def extract_payloads(attachments: Iterable[Attachment]) -> list[SuitePayload]:
    """Decode every results attachment, in order, ignoring unrelated attachments."""
    return [decode_payload(a) for a in attachments if is_results_attachment(a)]
