# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Persist raw and curated run results as JSON artifacts."""

from abc import ABC, abstractmethod
from pathlib import Path

import aiofiles
import orjson

from meetup_perf.common.exceptions import ArtifactWriteError
from meetup_perf.common.mixins import PerfLoggerMixin
from meetup_perf.common.models import CuratedResults, RunResults
from meetup_perf.exporters.exporter_config import ExporterConfig, FileExportInfo


class ArtifactBaseExporter(PerfLoggerMixin, ABC):
    """Base class for the JSON artifact exporters."""

    def __init__(self, exporter_config: ExporterConfig, **kwargs) -> None:
        super().__init__(**kwargs)
        self._output_directory = exporter_config.artifacts_path
        self._file_path: Path = self._resolve_file_path(exporter_config)

    @property
    def file_path(self) -> Path:
        return self._file_path

    @abstractmethod
    def _resolve_file_path(self, exporter_config: ExporterConfig) -> Path:
        raise NotImplementedError

    @abstractmethod
    def get_export_info(self) -> FileExportInfo:
        raise NotImplementedError

    @abstractmethod
    def _generate_content(self) -> bytes:
        """Generate the complete file content, ready to write."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _generate_content()"
        )

    async def export(self) -> Path:
        """Create the output directory if needed and write the artifact.

        Raises:
            ArtifactWriteError: If the file cannot be written.
        """
        self.debug(lambda: f"Exporting data to file: {self._file_path}")
        try:
            self._output_directory.mkdir(parents=True, exist_ok=True)
            content = self._generate_content()
            async with aiofiles.open(self._file_path, "wb") as f:
                await f.write(content)
        except OSError as e:
            self.error(lambda: f"Failed to export to {self._file_path}: {e}")
            raise ArtifactWriteError(self._file_path, e) from e
        return self._file_path


class RawResultsJsonExporter(ArtifactBaseExporter):
    """Writes `<runId>.performance-results.raw.json`: every sample, as received."""

    def __init__(self, exporter_config: ExporterConfig, results: RunResults, **kwargs) -> None:
        super().__init__(exporter_config, **kwargs)
        self._results = results

    def _resolve_file_path(self, exporter_config: ExporterConfig) -> Path:
        return exporter_config.raw_file_path

    def get_export_info(self) -> FileExportInfo:
        return FileExportInfo(export_type="Raw Results", file_path=self._file_path)

    def _generate_content(self) -> bytes:
        return orjson.dumps(self._results, option=orjson.OPT_INDENT_2)


class CuratedResultsJsonExporter(ArtifactBaseExporter):
    """Writes `<runId>.performance-results.json`: one StatsBundle per non-empty metric."""

    def __init__(
        self, exporter_config: ExporterConfig, curated: CuratedResults, **kwargs
    ) -> None:
        super().__init__(exporter_config, **kwargs)
        self._curated = curated

    def _resolve_file_path(self, exporter_config: ExporterConfig) -> Path:
        return exporter_config.curated_file_path

    def get_export_info(self) -> FileExportInfo:
        return FileExportInfo(export_type="Curated Results", file_path=self._file_path)

    def _generate_content(self) -> bytes:
        content = {
            suite: {metric: bundle.model_dump() for metric, bundle in metrics.items()}
            for suite, metrics in self._curated.items()
        }
        return orjson.dumps(content, option=orjson.OPT_INDENT_2)
