"""Parsing of raw response header lines."""

from collections.abc import Iterable


def parse_header_lines(lines: Iterable[str]) -> list[tuple[str, str]]:
    """Split raw header lines into (name, value) pairs.

    Lines are split on the first colon and trimmed. Lines that cannot be
    split (status lines, the blank terminator) are skipped. A status line
    starts a new header block, so only the final response's headers are
    returned when interim responses (e.g. ``100 Continue``) precede it.

    Args:
        lines: Header lines as received, with or without CRLF

    Returns:
        Header pairs in received order, duplicates preserved
    """
    headers: list[tuple[str, str]] = []
    for line in lines:
        if line.startswith("HTTP/"):
            headers = []
            continue
        name, sep, value = line.partition(":")
        name = name.strip()
        if not sep or not name:
            continue
        headers.append((name, value.strip()))
    return headers
