# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class MeetupPerfError(Exception):
    """Base class for all exceptions raised by meetup_perf."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class AttachmentDecodeError(MeetupPerfError):
    """Raised when a results attachment body cannot be decoded into a suite payload."""

    def __init__(self, attachment_name: str, reason: str) -> None:
        self.attachment_name = attachment_name
        self.reason = reason
        super().__init__(f"Invalid results attachment '{attachment_name}': {reason}")


class ArtifactWriteError(MeetupPerfError):
    """Raised when a results artifact cannot be written to disk."""

    def __init__(self, file_path, original_exception: Exception) -> None:
        self.file_path = file_path
        self.original_exception = original_exception
        super().__init__(f"Failed to write {file_path}: {original_exception!r}")


class ReporterStateError(MeetupPerfError):
    """Raised when a reporter receives an event that is invalid for its current state."""


class ArtifactReadError(MeetupPerfError):
    """Raised when a persisted results artifact cannot be loaded."""
