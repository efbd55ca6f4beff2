# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings for the performance reporter."""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from meetup_perf.common.constants import DEFAULT_ARTIFACTS_DIRECTORY


class ReporterSettings(BaseSettings):
    """Reporter configuration with environment variable support.

    `WP_ARTIFACTS_PATH` and `RESULTS_ID` keep the names used by the WordPress
    tooling so existing CI jobs keep working unchanged. The prefixed
    `MEETUP_PERF_ARTIFACTS_PATH` and `MEETUP_PERF_RESULTS_ID` are also read;
    the WordPress names win when both are set.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_prefix="MEETUP_PERF_",
        populate_by_name=True,
        extra="ignore",
    )

    artifacts_path: Path = Field(
        default_factory=lambda: Path.cwd() / DEFAULT_ARTIFACTS_DIRECTORY,
        validation_alias=AliasChoices(
            "WP_ARTIFACTS_PATH", "MEETUP_PERF_ARTIFACTS_PATH", "artifacts_path"
        ),
        description="Directory the raw and curated results artifacts are written to",
    )
    results_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("RESULTS_ID", "MEETUP_PERF_RESULTS_ID", "results_id"),
        description="Run identifier used to name artifacts. Defaults to a timestamp taken at flush time.",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for the CLI",
    )

    @field_validator("results_id", mode="before")
    @classmethod
    def _blank_results_id_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


def load_settings(**overrides) -> ReporterSettings:
    """Load settings from the environment, letting non-None overrides win."""
    return ReporterSettings(**{k: v for k, v in overrides.items() if v is not None})
