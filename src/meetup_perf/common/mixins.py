# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging

from meetup_perf.common.perf_logger import NOTICE, SUCCESS, TRACE, MessageT, PerfLogger


class PerfLoggerMixin:
    """Gives a class `self.debug(...)`, `self.info(...)`, etc. backed by a PerfLogger.

    The logger is named after the concrete class unless `logger_name` is given.
    Each method goes straight to `PerfLogger.log` so records point at the caller.
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        self.logger = PerfLogger(logger_name or self.__class__.__name__)
        super().__init__(**kwargs)

    def trace(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.log(TRACE, message, *args, **kwargs)

    def debug(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.log(logging.INFO, message, *args, **kwargs)

    def notice(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.log(NOTICE, message, *args, **kwargs)

    def warning(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.log(logging.WARNING, message, *args, **kwargs)

    def success(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.log(SUCCESS, message, *args, **kwargs)

    def error(self, message: MessageT, *args, **kwargs) -> None:
        self.logger.log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: MessageT, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self.logger.log(logging.ERROR, message, *args, **kwargs)
