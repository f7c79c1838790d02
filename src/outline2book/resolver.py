"""Resolve an outline against a content root into a ``Book``."""

from __future__ import annotations

from pathlib import Path

from outline2book.config import BuildOptions
from outline2book.content_source import ContentSource, FileSystemContentSource, relative_to_root
from outline2book.exceptions import ContentNotFoundError, PathEscapeError
from outline2book.materializer import create_missing
from outline2book.outline_parser import parse_outline
from outline2book.schemas import Book, Chapter, Link, Outline, Separator
from outline2book.utils.logging_config import get_logger
from outline2book.walker import iter_book

logger = get_logger(__name__)


def load_book(
    src_dir: Path | str,
    options: BuildOptions | None = None,
    *,
    source: ContentSource | None = None,
) -> Book:
    """Read the outline file from ``src_dir``, then parse and resolve it.

    Args:
        src_dir: Content root holding the outline file and chapter files.
        options: Build options. Uses defaults if None.
        source: Content source to read through. Defaults to the filesystem.

    Returns:
        The fully loaded book.

    Raises:
        ContentNotFoundError: If the outline or a chapter cannot be read.
        ParseError: If the outline is malformed.
    """
    opts = options or BuildOptions()
    src_dir = Path(src_dir)
    source = source or FileSystemContentSource(src_dir)
    outline_location = Path(opts.outline_filename)

    try:
        outline_text = source.read(outline_location)
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentNotFoundError(
            f"Couldn't open outline file {source.resolve(outline_location)}"
        ) from exc

    outline = parse_outline(outline_text, spaces_per_level=opts.spaces_per_level)

    if opts.create_missing:
        create_missing(src_dir, outline, source)

    book = resolve_book(outline, src_dir, source)
    logger.info(
        "Loaded book from %s (%d items)",
        src_dir,
        sum(1 for _ in iter_book(book)),
    )
    return book


def resolve_book(
    outline: Outline,
    src_dir: Path | str,
    source: ContentSource | None = None,
) -> Book:
    """Load every chapter the outline links to.

    Front matter, numbered chapters and back matter are resolved in that
    order, each depth-first in declaration order.

    Raises:
        ContentNotFoundError: If a chapter file cannot be read.
        PathEscapeError: If a chapter lies outside ``src_dir``.
    """
    logger.debug("Loading the book from %s", src_dir)
    src_dir = Path(src_dir)
    source = source or FileSystemContentSource(src_dir)

    book = Book()
    for item in outline.top_level_items():
        book.push_item(_load_item(item, src_dir, source, []))
    return book


def load_chapter(
    link: Link,
    src_dir: Path | str,
    parent_names: list[str],
    source: ContentSource | None = None,
) -> Chapter:
    """Load a single linked chapter and, recursively, its nested items."""
    src_dir = Path(src_dir)
    source = source or FileSystemContentSource(src_dir)
    logger.debug("Loading %s (%s)", link.name, link.location)

    location = source.resolve(link.location)
    try:
        relative_path = relative_to_root(src_dir, location)
    except PathEscapeError as exc:
        raise PathEscapeError(f'Chapter "{link.name}": {exc}') from exc

    try:
        content = source.read(link.location)
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentNotFoundError(
            f'Unable to read "{link.name}" ({location}): chapter file not found or unreadable'
        ) from exc

    child_parents = [*parent_names, link.name]
    sub_items = [_load_item(item, src_dir, source, child_parents) for item in link.nested_items]

    return Chapter(
        name=link.name,
        content=content,
        number=link.number,
        path=relative_path,
        parent_names=list(parent_names),
        sub_items=sub_items,
    )


def _load_item(
    item: Link | Separator,
    src_dir: Path,
    source: ContentSource,
    parent_names: list[str],
) -> Chapter | Separator:
    if isinstance(item, Separator):
        return Separator()
    return load_chapter(item, src_dir, parent_names, source)
