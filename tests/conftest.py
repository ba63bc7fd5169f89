"""Shared test fixtures for httpstat tests."""

import os
from collections.abc import Callable
from typing import Any

import pycurl
import pytest
from typer.testing import CliRunner

from httpstat.models import TimestampRecord


class FakeCurl:
    """Stand-in for pycurl.Curl that replays a canned transfer."""

    def __init__(
        self,
        info: dict[int, Any],
        header_lines: list[str],
        body: bytes = b"",
        error: pycurl.error | None = None,
    ) -> None:
        self.info = info
        self.header_lines = header_lines
        self.body = body
        self.error = error
        self.options: dict[int, Any] = {}
        self.closed = False

    def setopt(self, option: int, value: Any) -> None:
        self.options[option] = value

    def perform(self) -> None:
        if self.error is not None:
            raise self.error
        for line in self.header_lines:
            self.options[pycurl.HEADERFUNCTION](line.encode("iso-8859-1"))
        self.options[pycurl.WRITEDATA].write(self.body)

    def getinfo(self, option: int) -> Any:
        return self.info[option]

    def close(self) -> None:
        self.closed = True


def make_curl_info(
    namelookup: float = 0.010,
    connect: float = 0.040,
    appconnect: float = 0.090,
    starttransfer: float = 0.150,
    total: float = 0.200,
    status: int = 200,
    primary_ip: str = "93.184.216.34",
    primary_port: int = 443,
    local_ip: str = "192.0.2.10",
    local_port: int = 51234,
) -> dict[int, Any]:
    """Build a getinfo table with curl's offsets-from-start semantics."""
    return {
        pycurl.NAMELOOKUP_TIME: namelookup,
        pycurl.CONNECT_TIME: connect,
        pycurl.APPCONNECT_TIME: appconnect,
        pycurl.STARTTRANSFER_TIME: starttransfer,
        pycurl.TOTAL_TIME: total,
        pycurl.RESPONSE_CODE: status,
        pycurl.PRIMARY_IP: primary_ip,
        pycurl.PRIMARY_PORT: primary_port,
        pycurl.LOCAL_IP: local_ip,
        pycurl.LOCAL_PORT: local_port,
    }


SAMPLE_HEADER_LINES = [
    "HTTP/1.1 200 OK\r\n",
    "Content-Type: text/html; charset=UTF-8\r\n",
    "Set-Cookie: a=1\r\n",
    "Set-Cookie: b=2\r\n",
    "Content-Length: 13\r\n",
    "\r\n",
]


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop HTTPSTAT_* settings inherited from the host environment."""
    for name in list(os.environ):
        if name.startswith("HTTPSTAT_"):
            monkeypatch.delenv(name)


@pytest.fixture
def fake_curl() -> Callable[..., FakeCurl]:
    """Factory for FakeCurl instances with sensible HTTPS defaults."""

    def factory(
        header_lines: list[str] | None = None,
        body: bytes = b"<html></html>",
        error: pycurl.error | None = None,
        **info: Any,
    ) -> FakeCurl:
        return FakeCurl(
            make_curl_info(**info),
            SAMPLE_HEADER_LINES if header_lines is None else header_lines,
            body=body,
            error=error,
        )

    return factory


@pytest.fixture
def https_record() -> TimestampRecord:
    """Fully populated, ordered record (10/30/50/60/50 ms phases)."""
    return TimestampRecord(
        start=0.0,
        dns_resolved_at=0.010,
        tcp_connected_at=0.040,
        tls_handshake_done_at=0.090,
        first_byte_at=0.150,
        done_at=0.200,
    )


@pytest.fixture
def http_record() -> TimestampRecord:
    """Plaintext record without a TLS handshake instant."""
    return TimestampRecord(
        start=0.0,
        dns_resolved_at=0.005,
        tcp_connected_at=0.025,
        first_byte_at=0.100,
        done_at=0.120,
    )
