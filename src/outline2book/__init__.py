"""outline2book: turn a Markdown outline into a loaded book tree."""

from outline2book.config import BuildOptions
from outline2book.content_source import ContentSource, FileSystemContentSource
from outline2book.exceptions import (
    ContentNotFoundError,
    Outline2bookError,
    OutlineIndentationError,
    ParseError,
    PathEscapeError,
    ResolveError,
    StructureError,
)
from outline2book.materializer import create_missing
from outline2book.outline_parser import parse_outline
from outline2book.resolver import load_book, load_chapter, resolve_book
from outline2book.schemas import (
    Book,
    BookItem,
    Chapter,
    Link,
    Outline,
    OutlineItem,
    SectionNumber,
    Separator,
    VirtualChapter,
)
from outline2book.walker import BookItems, chapters, for_each_chapter_mut, for_each_mut, iter_book

__all__ = [
    "Book",
    "BookItem",
    "BookItems",
    "BuildOptions",
    "Chapter",
    "ContentNotFoundError",
    "ContentSource",
    "FileSystemContentSource",
    "Link",
    "Outline",
    "Outline2bookError",
    "OutlineIndentationError",
    "OutlineItem",
    "ParseError",
    "PathEscapeError",
    "ResolveError",
    "SectionNumber",
    "Separator",
    "StructureError",
    "VirtualChapter",
    "chapters",
    "create_missing",
    "for_each_chapter_mut",
    "for_each_mut",
    "iter_book",
    "load_book",
    "load_chapter",
    "parse_outline",
    "resolve_book",
]
