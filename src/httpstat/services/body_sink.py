"""Persistence of a captured response body."""

from pathlib import Path

from ..errors import BodyPersistenceError


def save_body(path: Path, body: bytes) -> None:
    """Write body bytes to path, creating parent directories.

    Args:
        path: Destination file
        body: Raw response body

    Raises:
        BodyPersistenceError: If the file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(body)
    except OSError as e:
        raise BodyPersistenceError(str(path), e.strerror or str(e)) from e
