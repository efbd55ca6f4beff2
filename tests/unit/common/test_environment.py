# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

import pytest

from meetup_perf.common.environment import ReporterSettings, load_settings


class TestReporterSettings:
    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = ReporterSettings()
        assert settings.artifacts_path == tmp_path / "artifacts" / "performance-results"
        assert settings.results_id is None
        assert settings.log_level == "INFO"

    def test_wordpress_environment_variables(self, monkeypatch):
        monkeypatch.setenv("WP_ARTIFACTS_PATH", "/tmp/wp-artifacts")
        monkeypatch.setenv("RESULTS_ID", "nightly-1")
        settings = ReporterSettings()
        assert settings.artifacts_path == Path("/tmp/wp-artifacts")
        assert settings.results_id == "nightly-1"

    def test_prefixed_environment_variables(self, monkeypatch):
        monkeypatch.setenv("MEETUP_PERF_ARTIFACTS_PATH", "/tmp/perf-artifacts")
        monkeypatch.setenv("MEETUP_PERF_RESULTS_ID", "nightly-2")
        settings = ReporterSettings()
        assert settings.artifacts_path == Path("/tmp/perf-artifacts")
        assert settings.results_id == "nightly-2"

    def test_wordpress_names_win_over_prefixed(self, monkeypatch):
        monkeypatch.setenv("WP_ARTIFACTS_PATH", "/tmp/wp-artifacts")
        monkeypatch.setenv("MEETUP_PERF_ARTIFACTS_PATH", "/tmp/perf-artifacts")
        monkeypatch.setenv("RESULTS_ID", "nightly-1")
        monkeypatch.setenv("MEETUP_PERF_RESULTS_ID", "nightly-2")
        settings = ReporterSettings()
        assert settings.artifacts_path == Path("/tmp/wp-artifacts")
        assert settings.results_id == "nightly-1"

    def test_log_level_uses_prefix(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        monkeypatch.setenv("MEETUP_PERF_LOG_LEVEL", "debug")
        assert ReporterSettings().log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_results_id_is_unset(self, monkeypatch, value):
        monkeypatch.setenv("RESULTS_ID", value)
        assert ReporterSettings().results_id is None


class TestLoadSettings:
    def test_overrides_win_over_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RESULTS_ID", "from-env")
        settings = load_settings(artifacts_path=tmp_path, results_id="from-cli")
        assert settings.artifacts_path == tmp_path
        assert settings.results_id == "from-cli"

    def test_none_overrides_are_ignored(self, monkeypatch):
        monkeypatch.setenv("RESULTS_ID", "from-env")
        assert load_settings(results_id=None).results_id == "from-env"
