"""Core timing logic for httpstat.

This package contains pure logic with no network I/O:
- phases: Phase durations derived from captured timestamps
- headers: Raw header line parsing
- report: Textual and JSON rendering of a measured request
"""

from .headers import parse_header_lines
from .phases import derive_phases
from .report import (
    format_duration,
    render,
    render_json,
    render_timing_table,
    write_report,
)

__all__ = [
    "derive_phases",
    "format_duration",
    "parse_header_lines",
    "render",
    "render_json",
    "render_timing_table",
    "write_report",
]
