"""Logging configuration for httpstat CLI.

The report is the program's output and is never logged. Diagnostics go
to stderr and stay silent on a normal run: only warnings surface unless
``-v`` asks for progress or ``-vv`` / ``HTTPSTAT_DEBUG`` asks for raw
timestamps and clamped phases.
"""

import logging
import sys
from enum import IntEnum
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """Diagnostic level selected by the command-line flags."""

    ERRORS_ONLY = logging.ERROR
    WARNINGS = logging.WARNING
    PROGRESS = logging.INFO
    TRACE = logging.DEBUG


def select_level(verbosity: int = 0, quiet: bool = False, debug: bool = False) -> LogLevel:
    """Map ``-q``, ``-v`` and ``HTTPSTAT_DEBUG`` to a level; quiet wins."""
    if quiet:
        return LogLevel.ERRORS_ONLY
    if debug or verbosity >= 2:
        return LogLevel.TRACE
    if verbosity == 1:
        return LogLevel.PROGRESS
    return LogLevel.WARNINGS


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
    stream: TextIO | None = None,
    debug: bool = False,
) -> Console:
    """Install a rich handler for diagnostics.

    Args:
        verbosity: Number of -v flags
        quiet: Only report errors
        no_color: Disable colored output
        stream: Output stream for logs (defaults to stderr)
        debug: Same as -vv

    Returns:
        Rich console the handler writes to
    """
    level = select_level(verbosity, quiet, debug)
    console = Console(
        file=stream or sys.stderr,
        force_terminal=False if no_color else None,
        no_color=no_color,
    )

    # Timestamps and source locations only matter when tracing the probe
    tracing = level == LogLevel.TRACE
    handler = RichHandler(console=console, show_time=tracing, show_path=tracing)

    logging.basicConfig(level=level, format="%(message)s", handlers=[handler])
    return console
