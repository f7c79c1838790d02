"""Depth-first traversal over a book tree."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Iterator

from outline2book.schemas import Book, Chapter, Separator, VirtualChapter

BookItemType = Chapter | VirtualChapter | Separator


class BookItems(Iterator[BookItemType]):
    """Pre-order iterator over book items.

    Prefer ``iter_book`` to creating this directly.
    """

    def __init__(self, items: Iterable[BookItemType]) -> None:
        self._items: deque[BookItemType] = deque(items)

    def __iter__(self) -> BookItems:
        return self

    def __next__(self) -> BookItemType:
        if not self._items:
            raise StopIteration
        item = self._items.popleft()
        if isinstance(item, (Chapter, VirtualChapter)):
            # extend() here instead would make this breadth-first
            self._items.extendleft(reversed(item.sub_items))
        return item


def iter_book(book: Book) -> BookItems:
    """Return a fresh depth-first iterator over every item in the book."""
    return BookItems(book.sections)


def chapters(book: Book) -> Iterator[Chapter]:
    """Yield file-backed chapters in reading order."""
    for item in iter_book(book):
        if isinstance(item, Chapter):
            yield item


def for_each_mut(func: Callable[[BookItemType], None], items: Iterable[BookItemType]) -> None:
    """Apply ``func`` to every item, each parent before its children.

    Each item is visited exactly once. A chapter's children are read after
    ``func`` has run on it, so children it adds are visited too.
    """
    for item in list(items):
        func(item)
        if isinstance(item, (Chapter, VirtualChapter)):
            for_each_mut(func, item.sub_items)


def for_each_chapter_mut(book: Book, func: Callable[[Chapter], None]) -> None:
    """Apply ``func`` to every file-backed chapter in the book."""

    def _visit(item: BookItemType) -> None:
        if isinstance(item, Chapter):
            func(item)

    for_each_mut(_visit, book.sections)
