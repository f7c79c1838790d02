"""Parse an indentation-structured outline into an ``Outline``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from outline2book.config import DEFAULT_SPACES_PER_LEVEL, parse_spaces_per_level
from outline2book.exceptions import StructureError
from outline2book.lines import classify_line, indentation_level
from outline2book.schemas import Link, Outline, SectionNumber, Separator
from outline2book.utils.logging_config import get_logger

logger = get_logger(__name__)

# Root counter value once back matter has started.
_CLOSED = -1


@dataclass
class _Frame:
    """One open nesting level: where items at ``level`` get appended."""

    level: int
    items: list[Link | Separator]


def parse_outline(text: str, *, spaces_per_level: int = DEFAULT_SPACES_PER_LEVEL) -> Outline:
    """Parse outline text into front matter, numbered chapters and back matter.

    Bare ``[Name](path)`` lines are front matter until the first list-style
    chapter, and back matter after it. List-style ``- [Name](path)`` lines are
    numbered chapters and may nest. Lines starting with ``--`` are
    separators. Anything else is ignored.

    Args:
        text: Raw outline document.
        spaces_per_level: Spaces making up one indentation level.

    Returns:
        The validated outline.

    Raises:
        OutlineIndentationError: If a line is indented by a partial level.
        StructureError: If items are nested or ordered incorrectly.
        ValueError: If ``spaces_per_level`` is below 1.
    """
    spaces_per_level = parse_spaces_per_level(spaces_per_level)
    outline = Outline()
    root = _Frame(level=0, items=outline.prefix_chapters)
    frames = [root]
    # One counter per open frame; section[0] is the root counter.
    section = [0]

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip(" \t"):
            continue

        level = indentation_level(line, spaces_per_level, line_number=line_number)

        while level < frames[-1].level:
            frames.pop()
            section.pop()

        if level > frames[-1].level:
            siblings = frames[-1].items
            parent = siblings[-1] if siblings else None
            if not isinstance(parent, Link) or parent.number is None:
                raise _structure_error(
                    line_number,
                    line,
                    "only numbered chapters can have nested items; prefix, suffix "
                    "and separator items cannot have children",
                )
            section.append(_count_numbered(parent.nested_items))
            frames.append(_Frame(level=level, items=parent.nested_items))

        item = classify_line(line)
        if item is None:
            logger.debug("Skipping line %d, not an outline item: %r", line_number, line)
            continue

        if item.kind == "separator":
            if level > 0:
                raise _structure_error(
                    line_number, line, "separators can only exist at the root level"
                )
            frames[-1].items.append(Separator())
            continue

        link = Link(name=item.name, location=Path(item.location), raw_location=item.location)

        if item.kind == "affix":
            if level > 0:
                raise _structure_error(
                    line_number, line, "prefix and suffix items can only exist at the root level"
                )
            if section[0] > 0:
                logger.debug("Back matter starts at line %d", line_number)
                section[0] = _CLOSED
                root.items = outline.suffix_chapters
            frames[-1].items.append(link)
            continue

        if section[0] == _CLOSED:
            raise _structure_error(
                line_number, line, "no numbered chapters are allowed after back matter"
            )
        if root.items is outline.prefix_chapters:
            root.items = outline.numbered_chapters

        section[-1] += 1
        link.number = SectionNumber(list(section))
        logger.debug("Chapter %s %s at line %d", link.number, link.name, line_number)
        frames[-1].items.append(link)

    return outline


def _count_numbered(items: list[Link | Separator]) -> int:
    return sum(1 for item in items if isinstance(item, Link) and item.number is not None)


def _structure_error(line_number: int, line: str, reason: str) -> StructureError:
    return StructureError(f"Invalid outline structure on line {line_number}: {reason}\n\n{line}")
