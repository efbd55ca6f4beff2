# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger wrapper that supports lazily evaluated messages and extra log levels."""

import logging
from collections.abc import Callable

TRACE = logging.DEBUG - 5
NOTICE = logging.INFO + 5
SUCCESS = logging.WARNING - 5

for _level, _name in ((TRACE, "TRACE"), (NOTICE, "NOTICE"), (SUCCESS, "SUCCESS")):
    logging.addLevelName(_level, _name)

MessageT = str | Callable[..., str]


class PerfLogger:
    """Thin wrapper around :class:`logging.Logger`.

    Messages may be passed as callables (e.g. ``lambda: f"..."``), which are only
    evaluated when the level is enabled. This keeps expensive debug formatting
    out of the hot path.
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        self._logger = logging.getLogger(logger_name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log(self, level: int, message: MessageT, *args, **kwargs) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if callable(message):
            message = message()
        # stacklevel=3 attributes the record to the caller of debug()/info()/...
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, message, *args, **kwargs)

    def trace(self, message: MessageT, *args, **kwargs) -> None:
        self.log(TRACE, message, *args, **kwargs)

    def debug(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.INFO, message, *args, **kwargs)

    def notice(self, message: MessageT, *args, **kwargs) -> None:
        self.log(NOTICE, message, *args, **kwargs)

    def warning(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.WARNING, message, *args, **kwargs)

    def success(self, message: MessageT, *args, **kwargs) -> None:
        self.log(SUCCESS, message, *args, **kwargs)

    def error(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: MessageT, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, message, *args, **kwargs)

    def critical(self, message: MessageT, *args, **kwargs) -> None:
        self.log(logging.CRITICAL, message, *args, **kwargs)
