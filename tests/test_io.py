"""Tests for skelgen.io module."""

from __future__ import annotations

from pathlib import Path

import pytest

from skelgen.io import read_file, write_file


class TestReadFile:
    """Tests for read_file function."""

    def test_reads_existing_file(self, tmp_path: Path) -> None:
        """Should read contents of existing file."""
        file = tmp_path / "test.txt"
        file.write_text("hello world", encoding="utf-8")

        assert read_file(file) == "hello world"

    def test_returns_default_for_missing_file(self, tmp_path: Path) -> None:
        """Should return default when file doesn't exist."""
        file = tmp_path / "nonexistent.txt"

        assert read_file(file) is None
        assert read_file(file, default="fallback") == "fallback"

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        """Should accept string paths."""
        file = tmp_path / "test.txt"
        file.write_text("content", encoding="utf-8")

        assert read_file(str(file)) == "content"

    def test_keeps_line_endings(self, tmp_path: Path) -> None:
        """Should not translate CRLF line endings."""
        file = tmp_path / "crlf.txt"
        file.write_bytes(b"a\r\nb\r\n")

        assert read_file(file) == "a\r\nb\r\n"

    def test_non_utf8_bytes_round_trip(self, tmp_path: Path) -> None:
        """Invalid UTF-8 bytes should survive a read and write unchanged."""
        source = tmp_path / "latin1.txt"
        source.write_bytes(b"caf\xe9\r\n")
        copy = tmp_path / "copy.txt"

        write_file(copy, read_file(source) or "")

        assert copy.read_bytes() == b"caf\xe9\r\n"

    def test_directory_raises(self, tmp_path: Path) -> None:
        """Only a missing file maps to the default."""
        with pytest.raises(OSError):
            read_file(tmp_path)


class TestWriteFile:
    """Tests for write_file function."""

    def test_writes_content(self, tmp_path: Path) -> None:
        """Should write content to file."""
        file = tmp_path / "output.txt"

        result = write_file(file, "test content")

        assert result == file
        assert file.read_text(encoding="utf-8") == "test content"

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        """Should replace, not append to, existing content."""
        file = tmp_path / "overwrite.txt"
        file.write_text("old content that is longer", encoding="utf-8")

        write_file(file, "new")

        assert file.read_text(encoding="utf-8") == "new"

    def test_writes_line_endings_verbatim(self, tmp_path: Path) -> None:
        file = tmp_path / "out.txt"

        write_file(file, "a\r\nb\n")

        assert file.read_bytes() == b"a\r\nb\n"

    def test_missing_parent_raises(self, tmp_path: Path) -> None:
        """Should not create parent directories."""
        file = tmp_path / "nested" / "output.txt"

        with pytest.raises(FileNotFoundError):
            write_file(file, "content")

        assert not file.parent.exists()

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        file = tmp_path / "out.txt"

        result = write_file(str(file), "x")

        assert isinstance(result, Path)
        assert file.read_text(encoding="utf-8") == "x"
