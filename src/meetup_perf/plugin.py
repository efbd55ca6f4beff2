# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""pytest integration for performance results reporting.

Tests attach results with the `perf_attach` fixture, or accumulate them in a
module-scoped `perf_suite(name)` recorder that is attached when the module
finishes. Pending attachments ride on the test's teardown report
(`user_properties`), so they also reach the controlling process under
pytest-xdist.

Reporting itself only happens with `--perf-report`: the run's raw and curated
artifacts are written at session finish and the summary is shown in the
terminal summary.
"""

import base64
import io
from collections.abc import Callable, Iterable

import orjson
import pytest
from rich.console import Console

from meetup_perf.common.constants import JSON_CONTENT_TYPE
from meetup_perf.common.enums import RunStatus
from meetup_perf.common.environment import load_settings
from meetup_perf.common.models import Attachment
from meetup_perf.controller import PerformanceReporter
from meetup_perf.measurement.recorder import SuiteRecorder

PERF_ATTACHMENT_PROPERTY = "perf_attachment"

_PENDING_ATTACHMENTS_KEY = pytest.StashKey[list[Attachment]]()

AttachFn = Callable[..., None]


def run_status_for(exitstatus: int) -> RunStatus:
    """Map a pytest session exit status onto a run status."""
    if exitstatus == pytest.ExitCode.OK:
        return RunStatus.PASSED
    if exitstatus == pytest.ExitCode.INTERRUPTED:
        return RunStatus.INTERRUPTED
    return RunStatus.FAILED


def attachment_to_property(attachment: Attachment) -> tuple[str, dict[str, str]]:
    """Encode an attachment as a report user property.

    The body travels as base64 so binary attachments survive xdist serialization.
    """
    return PERF_ATTACHMENT_PROPERTY, {
        "name": attachment.name,
        "content_type": attachment.content_type,
        "body_base64": base64.b64encode(attachment.body or b"").decode("ascii"),
    }


def attachments_from_report(report: pytest.TestReport) -> list[Attachment]:
    """The attachments carried by a test report's user properties."""
    return [
        Attachment(
            name=value["name"],
            content_type=value["content_type"],
            body=base64.b64decode(value["body_base64"]),
        )
        for key, value in report.user_properties
        if key == PERF_ATTACHMENT_PROPERTY
    ]


class PerformancePlugin:
    """Feeds finished tests into a PerformanceReporter and shows its report."""

    def __init__(self, reporter: PerformanceReporter, buffer: io.StringIO) -> None:
        self.reporter = reporter
        self._buffer = buffer

    @classmethod
    def from_config(cls, config: pytest.Config) -> "PerformancePlugin":
        settings = load_settings(
            artifacts_path=config.getoption("perf_artifacts_path"),
            results_id=config.getoption("perf_results_id"),
        )
        buffer = io.StringIO()
        reporter = PerformanceReporter(settings, console=Console(file=buffer))
        return cls(reporter, buffer)

    def pytest_runtest_logreport(self, report: pytest.TestReport) -> None:
        if report.when != "teardown":
            return
        attachments = attachments_from_report(report)
        if attachments:
            self.reporter.on_test_end(attachments)

    def pytest_sessionfinish(self, session: pytest.Session, exitstatus: int) -> None:
        self.reporter.on_end(run_status_for(exitstatus))

    def pytest_terminal_summary(self, terminalreporter) -> None:
        report = self._buffer.getvalue()
        if report:
            terminalreporter.write_sep("-", "performance results")
            terminalreporter.write(report)


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("meetup-perf", "performance results reporting")
    group.addoption(
        "--perf-report",
        action="store_true",
        default=False,
        help="Write performance results artifacts and print the performance summary.",
    )
    group.addoption(
        "--perf-artifacts-path",
        default=None,
        help="Directory for performance artifacts. Overrides WP_ARTIFACTS_PATH.",
    )
    group.addoption(
        "--perf-results-id",
        default=None,
        help="Run id used to name the artifacts. Overrides RESULTS_ID.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.stash[_PENDING_ATTACHMENTS_KEY] = []
    # xdist workers only forward reports; the controlling process reports.
    if config.getoption("perf_report") and not hasattr(config, "workerinput"):
        config.pluginmanager.register(
            PerformancePlugin.from_config(config), "meetup-perf-reporter"
        )


@pytest.hookimpl(wrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo):
    report = yield
    if call.when == "teardown":
        pending = item.config.stash[_PENDING_ATTACHMENTS_KEY]
        report.user_properties.extend(attachment_to_property(a) for a in pending)
        pending.clear()
    return report


def _queue(config: pytest.Config, attachments: Iterable[Attachment]) -> None:
    config.stash[_PENDING_ATTACHMENTS_KEY].extend(attachments)


@pytest.fixture
def perf_attach(request: pytest.FixtureRequest) -> AttachFn:
    """Attach a payload to the current test.

    `body` may be bytes, a str, or any JSON-serializable object.
    """

    def attach(name: str, body, content_type: str = JSON_CONTENT_TYPE) -> None:
        if isinstance(body, str):
            body = body.encode("utf-8")
        elif not isinstance(body, bytes):
            body = orjson.dumps(body)
        _queue(request.config, [Attachment(name=name, content_type=content_type, body=body)])

    return attach


@pytest.fixture(scope="module")
def perf_suite(request: pytest.FixtureRequest):
    """A factory of suite recorders shared by the tests of a module.

    Every recorder handed out is attached when the module's last test tears down.
    """
    recorders: dict[str, SuiteRecorder] = {}

    def get_recorder(name: str, metrics: tuple[str, ...] | None = None) -> SuiteRecorder:
        if name not in recorders:
            recorders[name] = SuiteRecorder(name, metrics)
        return recorders[name]

    yield get_recorder
    _queue(request.config, [recorder.to_attachment() for recorder in recorders.values()])
