"""Timing models for a single HTTP transaction.

A TimestampRecord holds the absolute instants captured by the transport as
the transaction moves through its phases. PhaseDurations is the read-only
breakdown derived from it by ``httpstat.core.phases.derive_phases``.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field

# Fixed boundary order; each optional instant must not precede the one before it.
TIMESTAMP_FIELDS = (
    "start",
    "dns_resolved_at",
    "tcp_connected_at",
    "tls_handshake_done_at",
    "first_byte_at",
    "done_at",
)

PHASE_LABELS = (
    "DNS Lookup",
    "TCP Connection",
    "TLS Handshake",
    "Server Processing",
    "Content Transfer",
)

BOUNDARY_NAMES = ("namelookup", "connect", "pretransfer", "starttransfer", "total")


class TimestampRecord(BaseModel):
    """Absolute instants (seconds) marking phase boundaries of one request.

    Attributes:
        start: When the request was issued
        dns_resolved_at: When name resolution finished
        tcp_connected_at: When the TCP connection was established
        tls_handshake_done_at: When the TLS handshake finished (None for plaintext)
        first_byte_at: When the first response byte arrived
        done_at: When the transfer completed
    """

    model_config = ConfigDict(frozen=True)

    start: float = Field(description="Request start instant")
    dns_resolved_at: float | None = Field(default=None, description="DNS resolved instant")
    tcp_connected_at: float | None = Field(default=None, description="TCP connected instant")
    tls_handshake_done_at: float | None = Field(
        default=None, description="TLS handshake done instant"
    )
    first_byte_at: float | None = Field(default=None, description="First byte instant")
    done_at: float = Field(description="Transfer done instant")

    @property
    def is_tls(self) -> bool:
        """Return True if the record carries a TLS handshake instant."""
        return self.tls_handshake_done_at is not None

    def clamped(self) -> Self:
        """Return a copy where no instant precedes the previous present one.

        Transports that cannot guarantee hook ordering call this before
        handing the record to the timing model.
        """
        values: dict[str, float | None] = {}
        previous = self.start
        for name in TIMESTAMP_FIELDS:
            value = getattr(self, name)
            if value is None:
                values[name] = None
                continue
            value = max(value, previous)
            values[name] = value
            previous = value
        return self.model_copy(update=values)


class PhaseDurations(BaseModel):
    """Per-phase breakdown of one request, in milliseconds.

    A phase is None when it does not apply (e.g. TLS for a plaintext URL),
    which is distinct from a phase that took (or was clamped to) zero.
    """

    model_config = ConfigDict(frozen=True)

    dns_lookup: float | None = Field(default=None, description="DNS lookup time in ms")
    tcp_connect: float | None = Field(default=None, description="TCP connect time in ms")
    tls_handshake: float | None = Field(default=None, description="TLS handshake time in ms")
    server_processing: float | None = Field(
        default=None, description="Server processing (TTFB) time in ms"
    )
    content_transfer: float | None = Field(
        default=None, description="Content transfer time in ms"
    )
    total: float = Field(default=0.0, description="Total request time in ms")

    def phases(self) -> list[tuple[str, float | None]]:
        """Return the five phases as (label, ms) pairs in wire order."""
        return list(
            zip(
                PHASE_LABELS,
                (
                    self.dns_lookup,
                    self.tcp_connect,
                    self.tls_handshake,
                    self.server_processing,
                    self.content_transfer,
                ),
                strict=True,
            )
        )

    def cumulative(self) -> list[tuple[str, float | None]]:
        """Return running totals from request start at each phase boundary.

        Absent phases contribute nothing; a boundary is None only when every
        phase up to it is absent. The last boundary always reports ``total``.
        """
        result: list[tuple[str, float | None]] = []
        running: float | None = None
        for name, (_, value) in zip(BOUNDARY_NAMES[:-1], self.phases()[:-1], strict=True):
            if value is not None:
                running = (running or 0.0) + value
            result.append((name, running))
        result.append((BOUNDARY_NAMES[-1], self.total))
        return result

    def phase_sum(self) -> float:
        """Return the sum of all present phases."""
        return sum(value for _, value in self.phases() if value is not None)
