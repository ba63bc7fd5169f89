"""Tests for response body persistence."""

from pathlib import Path

import pytest

from httpstat.errors import BodyPersistenceError
from httpstat.services.body_sink import save_body


class TestSaveBody:
    """Tests for save_body."""

    def test_writes_bytes(self, tmp_path: Path) -> None:
        """Body bytes should be written unchanged."""
        path = tmp_path / "body.bin"
        save_body(path, b"\x00\xffpayload")
        assert path.read_bytes() == b"\x00\xffpayload"

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Missing parent directories should be created."""
        path = tmp_path / "a" / "b" / "body.txt"
        save_body(path, b"ok")
        assert path.read_bytes() == b"ok"

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        """An existing file should be replaced."""
        path = tmp_path / "body.txt"
        path.write_bytes(b"old content")
        save_body(path, b"new")
        assert path.read_bytes() == b"new"

    def test_failure_raises(self, tmp_path: Path) -> None:
        """An unwritable destination should raise BodyPersistenceError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not directory")
        with pytest.raises(BodyPersistenceError) as exc_info:
            save_body(blocker / "body.txt", b"data")
        assert exc_info.value.path == str(blocker / "body.txt")
        assert exc_info.value.cause
