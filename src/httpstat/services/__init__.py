"""External collaborators for httpstat.

This package provides the I/O around the timing model:
- probe: HTTP transport through libcurl, capturing phase timestamps
- body_sink: Response body persistence
"""

from .body_sink import save_body
from .probe import ProbeResult, format_endpoint, run_probe

__all__ = [
    "ProbeResult",
    "format_endpoint",
    "run_probe",
    "save_body",
]
