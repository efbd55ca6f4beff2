# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import orjson
import pytest

from meetup_perf.common.exceptions import ArtifactWriteError
from meetup_perf.exporters import (
    CuratedResultsJsonExporter,
    ExporterConfig,
    RawResultsJsonExporter,
    resolve_run_id,
    timestamp_run_id,
)
from meetup_perf.metrics.statistics import stats


class TestRunId:
    def test_timestamp_run_id_is_file_name_safe(self):
        now = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
        assert timestamp_run_id(now) == "2025-01-02T03-04-05-678Z"

    def test_timestamp_run_id_converts_to_utc(self):
        now = datetime(2025, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert timestamp_run_id(now) == "2025-01-02T03-04-05-000Z"

    def test_resolve_run_id_prefers_override(self):
        assert resolve_run_id("ci-123") == "ci-123"

    def test_resolve_run_id_defaults_to_timestamp(self):
        run_id = resolve_run_id(None)
        assert run_id.endswith("Z")
        assert ":" not in run_id and "." not in run_id


class TestExporterConfig:
    def test_file_paths(self, tmp_path):
        config = ExporterConfig(artifacts_path=tmp_path, run_id="ci-1")
        assert config.raw_file_path == tmp_path / "ci-1.performance-results.raw.json"
        assert config.curated_file_path == tmp_path / "ci-1.performance-results.json"


class TestRawResultsJsonExporter:
    @pytest.mark.asyncio
    async def test_writes_raw_results(self, exporter_config):
        results = {"frontend": {"timeToFirstByte": [900], "lcpMinusTtfb": []}}
        path = await RawResultsJsonExporter(exporter_config, results).export()

        assert path == exporter_config.raw_file_path
        assert orjson.loads(path.read_bytes()) == results

    @pytest.mark.asyncio
    async def test_output_is_indented(self, exporter_config):
        path = await RawResultsJsonExporter(exporter_config, {"editor": {"loaded": [1]}}).export()
        assert path.read_text().startswith('{\n  "editor"')

    @pytest.mark.asyncio
    async def test_empty_results_still_write_a_file(self, exporter_config):
        path = await RawResultsJsonExporter(exporter_config, {}).export()
        assert orjson.loads(path.read_bytes()) == {}

    @pytest.mark.asyncio
    async def test_write_failure_raises_artifact_write_error(self, exporter_config):
        exporter = RawResultsJsonExporter(exporter_config, {})
        with (
            patch("aiofiles.open", side_effect=PermissionError("read-only")),
            pytest.raises(ArtifactWriteError) as exc_info,
        ):
            await exporter.export()
        assert exc_info.value.file_path == exporter_config.raw_file_path
        assert isinstance(exc_info.value.original_exception, PermissionError)

    def test_export_info(self, exporter_config):
        info = RawResultsJsonExporter(exporter_config, {}).get_export_info()
        assert info.export_type == "Raw Results"
        assert info.file_path == exporter_config.raw_file_path


class TestCuratedResultsJsonExporter:
    @pytest.mark.asyncio
    async def test_writes_stats_bundles(self, exporter_config):
        curated = {"frontend": {"timeToFirstByte": stats([900])}, "editor": {}}
        path = await CuratedResultsJsonExporter(exporter_config, curated).export()

        assert path == exporter_config.curated_file_path
        assert orjson.loads(path.read_bytes()) == {
            "frontend": {
                "timeToFirstByte": {
                    "count": 1,
                    "min": 900,
                    "max": 900,
                    "median": 900,
                    "q25": 900,
                    "q75": 900,
                }
            },
            "editor": {},
        }
