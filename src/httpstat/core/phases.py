"""Derivation of phase durations from captured instants.

Each phase is the difference between two boundary instants of a
TimestampRecord. A difference that comes out negative (clock skew, hooks
firing out of order) is reported as zero and is not pushed onto a
neighbouring phase, so only ``total`` is guaranteed to equal
``done_at - start``.
"""

import logging

from ..models import PhaseDurations, TimestampRecord

logger = logging.getLogger(__name__)


def _span(phase: str, begin: float, end: float | None) -> float | None:
    """Return ``end - begin`` in milliseconds, clamped at zero.

    Returns None when the closing instant was not captured.
    """
    if end is None:
        return None
    delta_ms = (end - begin) * 1000.0
    if delta_ms < 0:
        logger.debug("Clamped %s from %.3fms to 0ms", phase, delta_ms)
        return 0.0
    return delta_ms


def derive_phases(record: TimestampRecord) -> PhaseDurations:
    """Derive the five phase durations and the total from a record.

    A phase whose closing instant is absent is not applicable (None). When
    an opening instant is absent, the nearest earlier captured instant
    opens the phase instead; for a plaintext request this makes server
    processing run from the TCP connection.

    Args:
        record: Fully populated timestamps of one transaction

    Returns:
        Immutable per-phase breakdown in milliseconds
    """
    boundaries = (
        ("dns_lookup", record.dns_resolved_at),
        ("tcp_connect", record.tcp_connected_at),
        ("tls_handshake", record.tls_handshake_done_at),
        ("server_processing", record.first_byte_at),
        ("content_transfer", record.done_at),
    )

    durations: dict[str, float | None] = {}
    opened_at = record.start
    for phase, closed_at in boundaries:
        durations[phase] = _span(phase, opened_at, closed_at)
        if closed_at is not None:
            opened_at = closed_at

    total = _span("total", record.start, record.done_at)
    return PhaseDurations(total=total or 0.0, **durations)
