# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import sys
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


@contextmanager
def exit_on_error(
    *exceptions: type[BaseException],
    message: str = "{e}",
    title: str = "Error",
    exit_code: int = 1,
):
    """Print any matching exception in a red panel on stderr and exit the process.

    Args:
        exceptions: Exception types to handle. Defaults to any `Exception`.
        message: Message template, formatted with the exception as `e`.
        title: Panel title.
        exit_code: Process exit status.
    """
    try:
        yield
    except SystemExit:
        raise
    except exceptions or (Exception,) as e:
        console = Console(stderr=True)
        console.print(
            Panel(
                Text(message.format(e=e), style="bold"),
                title=title,
                title_align="left",
                border_style="red",
            )
        )
        console.file.flush()
        sys.exit(exit_code)
