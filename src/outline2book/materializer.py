"""Create stub files for chapters that do not exist yet."""

from __future__ import annotations

from pathlib import Path

from outline2book.content_source import ContentSource, FileSystemContentSource, relative_to_root
from outline2book.exceptions import PathEscapeError
from outline2book.schemas import Link, Outline
from outline2book.utils.logging_config import get_logger

logger = get_logger(__name__)


def create_missing(
    src_dir: Path,
    outline: Outline,
    source: ContentSource | None = None,
) -> list[Path]:
    """Create a ``# Name`` stub for every linked file that is missing.

    Existing files are never touched, so running this twice is harmless.

    Args:
        src_dir: Content root that relative links are resolved against.
        outline: Parsed outline whose links should exist.
        source: Content source to write through. Defaults to the filesystem
            under ``src_dir``.

    Returns:
        Paths of the files that were created.

    Raises:
        PathEscapeError: If a missing target lies outside ``src_dir``.
        OSError: If a directory or file cannot be created.
    """
    source = source or FileSystemContentSource(src_dir)

    missing: list[Link] = []
    seen: set[Path] = set()
    # Reversed so pop() walks links in declaration order.
    pending = list(reversed(list(outline.top_level_items())))
    while pending:
        item = pending.pop()
        if not isinstance(item, Link):
            continue

        target = source.resolve(item.location)
        if target not in seen and not source.exists(item.location):
            try:
                relative_to_root(src_dir, target)
            except PathEscapeError as exc:
                raise PathEscapeError(f'Cannot create "{item.name}": {exc}') from exc
            seen.add(target)
            missing.append(item)

        pending.extend(reversed(item.nested_items))

    # Targets are all checked before any file is written.
    created: list[Path] = []
    for link in missing:
        logger.debug("Creating missing file %s", source.resolve(link.location))
        created.append(source.create(link.location, f"# {link.name}\n"))

    if created:
        logger.info("Created %d missing chapter file(s) under %s", len(created), src_dir)
    return created
