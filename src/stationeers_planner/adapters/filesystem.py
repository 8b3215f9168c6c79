"""Boundary for reading raw game files."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileReader(Protocol):
    """Returns the raw bytes stored at a path."""

    def read_bytes(self, path: str | Path) -> bytes:
        """Read a file; raise ``OSError`` (usually ``FileNotFoundError``) when it cannot be read."""


class LocalFileReader:
    """Reads files from the local disk."""

    def read_bytes(self, path: str | Path) -> bytes:
        return Path(path).read_bytes()
