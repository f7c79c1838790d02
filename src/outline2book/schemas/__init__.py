"""Shared schemas for outline2book."""

from outline2book.schemas.book import Book, BookItem, Chapter, VirtualChapter
from outline2book.schemas.common import SectionNumber, Separator
from outline2book.schemas.outline import Link, Outline, OutlineItem

__all__ = [
    "Book",
    "BookItem",
    "Chapter",
    "Link",
    "Outline",
    "OutlineItem",
    "SectionNumber",
    "Separator",
    "VirtualChapter",
]
