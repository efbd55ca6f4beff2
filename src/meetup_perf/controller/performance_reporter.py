# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio
from collections.abc import Iterable
from pathlib import Path

from rich.console import Console

from meetup_perf.common.enums import RunStatus
from meetup_perf.common.environment import ReporterSettings, load_settings
from meetup_perf.common.exceptions import AttachmentDecodeError, ReporterStateError
from meetup_perf.common.mixins import PerfLoggerMixin
from meetup_perf.common.models import Attachment, RunSummary, SuitePayload
from meetup_perf.exporters import (
    ArtifactBaseExporter,
    ConsoleReportExporter,
    CuratedResultsJsonExporter,
    ExporterConfig,
    RawResultsJsonExporter,
    resolve_run_id,
)
from meetup_perf.post_processors import aggregate
from meetup_perf.records import SampleStore, decode_payload, is_results_attachment


class PerformanceReporter(PerfLoggerMixin):
    """Collects results attachments over a test run and reports on them at the end.

    Lifecycle:
        1. Construction resolves (and creates) the artifacts directory.
        2. `on_test_end` is called once per finished test with its attachments.
        3. `on_end` is called once when the whole run is over. It writes the raw
           and curated artifacts and prints the report. The reporter is finished
           afterwards and rejects further events.

    Args:
        settings: Reporter settings. Loaded from the environment if omitted.
        console: Where the report is printed. Defaults to stdout.
        strict: Re-raise malformed results attachments instead of logging and skipping them.
    """

    def __init__(
        self,
        settings: ReporterSettings | None = None,
        console: Console | None = None,
        strict: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._settings = settings or load_settings()
        self._console = console or Console()
        self._strict = strict
        self._store = SampleStore()
        self._summary: RunSummary | None = None

        self._artifacts_path = Path(self._settings.artifacts_path)
        self._artifacts_path.mkdir(parents=True, exist_ok=True)
        self.debug(lambda: f"Writing performance artifacts to {self._artifacts_path}")

    @property
    def artifacts_path(self) -> Path:
        return self._artifacts_path

    @property
    def store(self) -> SampleStore:
        return self._store

    @property
    def is_finished(self) -> bool:
        return self._summary is not None

    @property
    def summary(self) -> RunSummary | None:
        return self._summary

    def on_test_end(self, attachments: Iterable[Attachment]) -> list[SuitePayload]:
        """Merge every results attachment of a finished test into the run results."""
        self._ensure_running("on_test_end")
        accepted: list[SuitePayload] = []
        for attachment in attachments:
            if not is_results_attachment(attachment):
                continue
            try:
                payload = decode_payload(attachment)
            except AttachmentDecodeError as e:
                if self._strict:
                    raise
                self.warning(f"Skipping results attachment: {e}")
                continue
            self._store.merge(payload)
            accepted.append(payload)
        return accepted

    def on_end(self, status: RunStatus | str) -> RunSummary:
        """Flush artifacts and print the report. Runs its own event loop."""
        return asyncio.run(self.on_end_async(status))

    async def on_end_async(self, status: RunStatus | str) -> RunSummary:
        self._ensure_running("on_end")
        status = RunStatus(status)
        exporter_config = ExporterConfig(
            artifacts_path=self._artifacts_path,
            run_id=resolve_run_id(self._settings.results_id),
        )

        raw_results = self._store.snapshot()
        raw_path = await self._export(RawResultsJsonExporter(exporter_config, raw_results))

        curated = aggregate(raw_results)
        curated_path = await self._export(
            CuratedResultsJsonExporter(exporter_config, curated)
        )

        await ConsoleReportExporter(
            curated, status, raw_path=raw_path, curated_path=curated_path
        ).export(self._console)

        self._summary = RunSummary(
            run_id=exporter_config.run_id,
            status=status,
            raw_path=raw_path,
            curated_path=curated_path,
            curated=curated,
        )
        return self._summary

    async def _export(self, exporter: ArtifactBaseExporter) -> Path:
        path = await exporter.export()
        info = exporter.get_export_info()
        self.debug(lambda: f"Wrote {info.export_type} to {info.file_path}")
        return path

    def _ensure_running(self, event: str) -> None:
        if self._summary is not None:
            raise ReporterStateError(
                f"Cannot handle '{event}': the run {self._summary.run_id} has already ended"
            )
