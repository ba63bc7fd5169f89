"""Transport probe: one HTTP request through libcurl.

libcurl reports each phase boundary as an offset from the start of the
transfer (NAMELOOKUP_TIME, CONNECT_TIME, APPCONNECT_TIME,
STARTTRANSFER_TIME, TOTAL_TIME). The probe anchors those offsets on a
monotonic start instant to build the TimestampRecord handed to the
timing model.

REF: https://curl.se/libcurl/c/curl_easy_getinfo.html
"""

import io
import logging
import time
from dataclasses import dataclass

import pycurl

from ..constants import CONNECT_TIMEOUT, REQUEST_TIMEOUT
from ..core.headers import parse_header_lines
from ..errors import TransportError
from ..models import ConnectionInfo, ResponseSummary, TimestampRecord

logger = logging.getLogger(__name__)

# Header bytes are latin-1 on the wire
HEADER_ENCODING = "iso-8859-1"


@dataclass
class ProbeResult:
    """Everything captured for one completed transaction."""

    record: TimestampRecord
    response: ResponseSummary
    connection: ConnectionInfo


def format_endpoint(ip: str | None, port: int | None) -> str | None:
    """Format a socket endpoint as ``host:port``, bracketing IPv6 hosts.

    Returns None when the transport did not report an address.
    """
    if not ip:
        return None
    host = f"[{ip}]" if ":" in ip else ip
    return f"{host}:{port}" if port else host


def _build_record(curl: pycurl.Curl, start: float) -> TimestampRecord:
    appconnect = curl.getinfo(pycurl.APPCONNECT_TIME)
    record = TimestampRecord(
        start=start,
        dns_resolved_at=start + curl.getinfo(pycurl.NAMELOOKUP_TIME),
        tcp_connected_at=start + curl.getinfo(pycurl.CONNECT_TIME),
        # Zero means no TLS handshake took place (plaintext request)
        tls_handshake_done_at=start + appconnect if appconnect > 0 else None,
        first_byte_at=start + curl.getinfo(pycurl.STARTTRANSFER_TIME),
        done_at=start + curl.getinfo(pycurl.TOTAL_TIME),
    )
    return record.clamped()


def _build_connection(curl: pycurl.Curl) -> ConnectionInfo:
    return ConnectionInfo(
        remote_address=format_endpoint(
            curl.getinfo(pycurl.PRIMARY_IP), curl.getinfo(pycurl.PRIMARY_PORT)
        ),
        local_address=format_endpoint(
            curl.getinfo(pycurl.LOCAL_IP), curl.getinfo(pycurl.LOCAL_PORT)
        ),
    )


def run_probe(
    url: str,
    timeout: float = REQUEST_TIMEOUT,
    connect_timeout: float = CONNECT_TIMEOUT,
) -> ProbeResult:
    """Perform a single GET request and capture its phase timestamps.

    Redirects are not followed, so the measured transaction is exactly one
    request/response pair.

    Args:
        url: Target URL (http or https)
        timeout: Whole-transfer timeout in seconds
        connect_timeout: Connection setup timeout in seconds

    Returns:
        Timestamps, response and connection endpoints of the transaction

    Raises:
        TransportError: If DNS, connection, TLS or transfer fails, or times out
    """
    header_lines: list[str] = []
    body = io.BytesIO()

    def on_header(raw: bytes) -> None:
        header_lines.append(raw.decode(HEADER_ENCODING))

    curl = pycurl.Curl()
    try:
        curl.setopt(pycurl.URL, url)
        curl.setopt(pycurl.FOLLOWLOCATION, False)
        curl.setopt(pycurl.PROTOCOLS, pycurl.PROTO_HTTP | pycurl.PROTO_HTTPS)
        curl.setopt(pycurl.HTTP_VERSION, pycurl.CURL_HTTP_VERSION_1_1)
        curl.setopt(pycurl.NOSIGNAL, 1)
        curl.setopt(pycurl.CONNECTTIMEOUT_MS, int(min(connect_timeout, timeout) * 1000))
        curl.setopt(pycurl.TIMEOUT_MS, int(timeout * 1000))
        curl.setopt(pycurl.HEADERFUNCTION, on_header)
        curl.setopt(pycurl.WRITEDATA, body)

        logger.debug("GET %s (timeout %ss)", url, timeout)
        start = time.monotonic()
        try:
            curl.perform()
        except pycurl.error as e:
            code = e.args[0] if e.args else None
            message = e.args[1] if len(e.args) > 1 and e.args[1] else f"curl error {code}"
            raise TransportError(url, message, code) from e

        record = _build_record(curl, start)
        response = ResponseSummary(
            status=curl.getinfo(pycurl.RESPONSE_CODE),
            headers=parse_header_lines(header_lines),
            body=body.getvalue(),
        )
        connection = _build_connection(curl)
    finally:
        curl.close()

    if response.status == 0:
        raise TransportError(url, "no HTTP response received")

    logger.debug("Captured timestamps: %s", record.model_dump())
    logger.info("HTTP %d from %s", response.status, connection.remote_address or url)
    return ProbeResult(record=record, response=response, connection=connection)
