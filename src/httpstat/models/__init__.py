"""Pydantic data models for httpstat.

This package defines the data structures passed between the transport
probe, the timing model and the report renderer:
- Captured instants and derived phases (TimestampRecord, PhaseDurations)
- Response and socket metadata (ResponseSummary, ConnectionInfo)
- Rendering switches (ReportOptions)

Example:
    >>> from httpstat.models import TimestampRecord
    >>> record = TimestampRecord(start=0.0, done_at=0.2)
    >>> record.model_dump_json()
"""

from .report import ReportOptions
from .response import ConnectionInfo, ResponseSummary
from .timing import (
    BOUNDARY_NAMES,
    PHASE_LABELS,
    TIMESTAMP_FIELDS,
    PhaseDurations,
    TimestampRecord,
)

__all__ = [
    "BOUNDARY_NAMES",
    "PHASE_LABELS",
    "TIMESTAMP_FIELDS",
    "ConnectionInfo",
    "PhaseDurations",
    "ReportOptions",
    "ResponseSummary",
    "TimestampRecord",
]
