"""Access to chapter files under a content root."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from outline2book.exceptions import PathEscapeError


class ContentSource(Protocol):
    """Store that chapter content is read from and stubs are written to."""

    root: Path

    def resolve(self, location: Path) -> Path: ...

    def read(self, location: Path) -> str: ...

    def exists(self, location: Path) -> bool: ...

    def create(self, location: Path, content: str) -> Path: ...


class FileSystemContentSource:
    """Content source backed by a directory on disk.

    Relative locations are joined to ``root``; absolute locations are used
    as they are.
    """

    def __init__(self, root: Path | str, encoding: str = "utf-8") -> None:
        self.root = Path(root)
        self.encoding = encoding

    def resolve(self, location: Path) -> Path:
        location = Path(location)
        if location.is_absolute():
            return location
        return self.root / location

    def read(self, location: Path) -> str:
        """Read a file as text.

        Raises:
            OSError: If the file is missing, is a directory, or unreadable.
            UnicodeDecodeError: If the file is not valid text.
        """
        return self.resolve(location).read_text(encoding=self.encoding)

    def exists(self, location: Path) -> bool:
        return self.resolve(location).exists()

    def create(self, location: Path, content: str) -> Path:
        """Write a new file, creating parent directories as needed."""
        path = self.resolve(location)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=self.encoding)
        return path


def relative_to_root(src_dir: Path | str, location: Path) -> Path:
    """Return ``location`` relative to the content root.

    Both paths are fully resolved first, so ``..`` segments, symlinks and a
    relative ``src_dir`` are all taken into account.

    Raises:
        PathEscapeError: If ``location`` does not lie under ``src_dir``.
    """
    root = Path(src_dir).resolve()
    resolved = Path(location).resolve()
    try:
        return resolved.relative_to(root)
    except ValueError as exc:
        raise PathEscapeError(f"{location} is not inside the content root {root}") from exc
