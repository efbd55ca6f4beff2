# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console and file logging for the meetup_perf command line tools.

The pytest plugin deliberately does not call into this module: under pytest,
log handling belongs to pytest's own logging plugin.

Usage::

    from meetup_perf.common.logging import setup_rich_logging

    setup_rich_logging(settings.log_level, settings.artifacts_path / LOG_FOLDER)
"""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console, ConsoleRenderable, Group
from rich.logging import RichHandler
from rich.text import Text
from rich.traceback import Traceback

from meetup_perf.common.constants import LOG_FILE
from meetup_perf.common.perf_logger import PerfLogger

_logger = PerfLogger(__name__)


def setup_rich_logging(level: str | int = "INFO", log_folder: Path | None = None) -> None:
    """Set up rich logging on the root logger, plus a file handler if `log_folder` is given."""
    if isinstance(level, str):
        level = level.upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to avoid duplicate logs
    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    rich_handler = CustomRichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=Console(stderr=True),
        show_time=False,
        show_level=False,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    root_logger.addHandler(rich_handler)

    if log_folder is not None:
        root_logger.addHandler(create_file_handler(log_folder, level))

    _logger.debug(lambda: f"Logging initialized with level: {level}")


def create_file_handler(
    log_folder: Path,
    level: str | int,
) -> logging.FileHandler:
    """Configure a file handler for logging."""

    log_folder.mkdir(parents=True, exist_ok=True)
    log_file_path = log_folder / LOG_FILE

    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return file_handler


class CustomRichHandler(RichHandler):
    """Rich logging handler with a compact single-line format.

    Example Output::

        12:26:52.092 INFO     Wrote raw results to /tmp/run.performance-results.raw.json (PerformanceReporter:141)
    """

    LOG_LEVEL_STYLES = {
        "TRACE": "dim",
        "DEBUG": "dim",
        "INFO": "cyan",
        "NOTICE": "blue",
        "WARNING": "yellow",
        "SUCCESS": "green",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        """Render a log record as ``HH:MM:SS.mmm LEVEL    message (logger:lineno)``."""
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        level_style = self.LOG_LEVEL_STYLES.get(record.levelname, "white")

        formatted_log = Text.assemble(
            Text(f"{timestamp} ", style="log.time"),
            Text(f"{record.levelname:<8} ", style=level_style),
            Text(record.getMessage()),
            Text(f" ({record.name}:{record.lineno})", style="dim italic"),
        )
        return Group(formatted_log, traceback) if traceback else formatted_log

    def emit(self, record: logging.LogRecord) -> None:
        traceback = None
        if (
            self.rich_tracebacks
            and record.exc_info
            and record.exc_info != (None, None, None)
        ):
            traceback = Traceback.from_exception(*record.exc_info)

        renderable = self.render(
            record=record, traceback=traceback, message_renderable=Text("")
        )
        try:
            self.console.print(renderable)
        except Exception:
            self.handleError(record)
