"""File I/O helpers for skelgen.

A missing file is the only condition turned into a default. Every other
failure is raised to the caller. Line endings are never translated, and
bytes that are not valid UTF-8 round-trip unchanged as surrogate escapes.
"""

from __future__ import annotations

from pathlib import Path


def read_file(path: Path | str, default: str | None = None) -> str | None:
    """Read a file's contents, returning default if it does not exist.

    Args:
        path: Path to the file to read.
        default: Value to return if the file doesn't exist.

    Returns:
        File contents as string, or default if the file is missing.

    Raises:
        OSError: If the file exists but cannot be read.
    """
    try:
        with Path(path).open("r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            return f.read()
    except FileNotFoundError:
        return default


def write_file(path: Path | str, content: str) -> Path:
    """Replace a file's contents in full.

    The parent directory must already exist.

    Args:
        path: Destination file path.
        content: String content to write.

    Returns:
        The path written, as a Path object.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(path)
    with path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(content)
    return path
