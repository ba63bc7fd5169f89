"""Report rendering for a measured request.

The report is a status line, the response headers in wire order, and a
timing table with one column per phase and one line per cumulative
boundary:

       DNS Lookup     TCP Connection   ...
    [      10ms    |        30ms      | ...
                   |                  | ...
         namelookup:   10ms           | ...
                               connect:   40ms ...

Rendering is pure; ``write_report`` is the only function that touches an
output sink.
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ..constants import DURATION_WIDTH, NOT_APPLICABLE
from ..errors import BodyPersistenceError
from ..models import ConnectionInfo, PhaseDurations, ReportOptions, ResponseSummary
from ..output import OutputContext
from ..services.body_sink import save_body

logger = logging.getLogger(__name__)

# Blank columns around each phase label in the table
COLUMN_PADDING = 4


def format_duration(ms: float | None) -> str:
    """Format milliseconds as a right-aligned whole-millisecond string."""
    text = NOT_APPLICABLE if ms is None else f"{round(ms)}ms"
    return text.rjust(DURATION_WIDTH)


def _column_widths(labels: Sequence[str]) -> list[int]:
    return [len(label) + COLUMN_PADDING for label in labels]


def _boundary_positions(widths: Sequence[int]) -> list[int]:
    """Return the offset of each column's closing separator in the value row."""
    positions = []
    offset = 0
    for width in widths:
        offset += width + 1
        positions.append(offset)
    return positions


def render_timing_table(phases: PhaseDurations) -> list[str]:
    """Render the phase columns and the cumulative breakdown."""
    pairs = phases.phases()
    labels = [label for label, _ in pairs]
    widths = _column_widths(labels)
    positions = _boundary_positions(widths)
    line_length = positions[-1] + 1

    header = " ".join(label.center(width) for label, width in zip(labels, widths, strict=True))
    lines = [
        f" {header}".rstrip(),
        "["
        + "|".join(
            format_duration(value).center(width)
            for (_, value), width in zip(pairs, widths, strict=True)
        )
        + "]",
    ]

    ticks = [" "] * line_length
    for position in positions:
        ticks[position] = "|"
    lines.append("".join(ticks))

    for index, (name, value) in enumerate(phases.cumulative()):
        chars = [" "] * line_length
        for position in positions[index + 1 :]:
            chars[position] = "|"
        text = f"{name}:{format_duration(value)}"
        begin = positions[index] - len(name)
        chars[begin : begin + len(text)] = text
        lines.append("".join(chars).rstrip())

    return lines


def render(
    status: int,
    headers: Sequence[tuple[str, str]],
    phases: PhaseDurations,
    options: ReportOptions,
    connection: ConnectionInfo | None = None,
) -> str:
    """Render the textual report.

    Args:
        status: Numeric HTTP status code
        headers: (name, value) pairs in wire order
        phases: Derived phase durations
        options: Optional report sections
        connection: Socket endpoints, printed when known and enabled

    Returns:
        Report text without a trailing newline
    """
    lines = []
    if options.show_remote_address and connection is not None and connection.is_known:
        lines.append(
            f"Connected to {connection.remote_address} from {connection.local_address}"
        )

    lines.append(f"HTTP/1.1 {status}")
    for name, value in headers:
        name = name.strip()
        if not name:
            continue
        lines.append(f"{name}: {value.strip()}".rstrip())

    lines.append("")
    lines.extend(render_timing_table(phases))
    return "\n".join(lines)


def render_json(
    status: int,
    headers: Sequence[tuple[str, str]],
    phases: PhaseDurations,
    options: ReportOptions,
    connection: ConnectionInfo | None = None,
) -> dict[str, Any]:
    """Build the machine-readable form of the report."""
    data: dict[str, Any] = {
        "status": status,
        "headers": [[name.strip(), value.strip()] for name, value in headers if name.strip()],
        "timings": phases.model_dump(),
        "cumulative": dict(phases.cumulative()),
    }
    if options.show_remote_address and connection is not None and connection.is_known:
        data["connection"] = connection.model_dump()
    return data


def write_report(
    output: OutputContext,
    response: ResponseSummary,
    phases: PhaseDurations,
    options: ReportOptions,
    connection: ConnectionInfo | None = None,
    body_path: Path | None = None,
) -> bool:
    """Write the report to the output sink and persist the body if enabled.

    A failure to save the body is reported after the table and does not
    affect the report already written.

    Returns:
        False if the body could not be saved, True otherwise
    """
    save = options.show_body and body_path is not None

    if output.json_mode:
        data = render_json(response.status, response.headers, phases, options, connection)
        if save:
            try:
                save_body(body_path, response.body or b"")
                data["body_path"] = str(body_path)
            except BodyPersistenceError as e:
                data["body_error"] = e.cause
        output.print_json(data)
        return "body_error" not in data

    output.write(render(response.status, response.headers, phases, options, connection))
    if not save:
        return True

    try:
        save_body(body_path, response.body or b"")
    except BodyPersistenceError as e:
        logger.debug("Body persistence failed: %s", e)
        output.error(f"Failed to save response body: {e.cause}")
        return False

    output.write("")
    output.success(f"Body stored in: {body_path}")
    return True
