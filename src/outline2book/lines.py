"""Classify single outline lines and measure their indentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from outline2book.config import DEFAULT_SPACES_PER_LEVEL
from outline2book.exceptions import OutlineIndentationError
from outline2book.utils.logging_config import get_logger

logger = get_logger(__name__)

LineKind = Literal["separator", "numbered", "affix"]

_LIST_MARKERS = ("-", "*")


@dataclass
class ClassifiedLine:
    """An outline line recognised as an item.

    Attributes:
        kind: ``separator``, ``numbered`` (list-style link) or ``affix``
            (bare link used for front and back matter).
        name: Display name of the link; empty for separators.
        location: Raw link target exactly as written; empty for separators.
    """

    kind: LineKind
    name: str = ""
    location: str = ""


def indentation_level(
    line: str,
    spaces_per_level: int = DEFAULT_SPACES_PER_LEVEL,
    *,
    line_number: int | None = None,
) -> int:
    """Return the nesting level of a line.

    Each tab counts as one level. Spaces count as one level per
    ``spaces_per_level`` of them.

    Raises:
        OutlineIndentationError: If spaces are left over once the leading
            whitespace ends.
    """
    spaces = 0
    level = 0
    for char in line:
        if char == " ":
            spaces += 1
        elif char == "\t":
            level += 1
        else:
            break
        if spaces >= spaces_per_level:
            level += 1
            spaces = 0

    if spaces > 0:
        raise OutlineIndentationError(
            line, spaces_per_level=spaces_per_level, line_number=line_number
        )
    return level


def classify_line(line: str) -> ClassifiedLine | None:
    """Work out what kind of outline item a line is.

    Returns None for anything that is not an item: blank lines, prose, and
    list entries that are not well-formed links.
    """
    stripped = line.strip(" \t")

    if stripped.startswith("--"):
        return ClassifiedLine(kind="separator")
    if not stripped:
        return None

    first = stripped[0]
    if first in _LIST_MARKERS:
        kind: LineKind = "numbered"
    elif first == "[":
        kind = "affix"
    else:
        return None

    link = read_link(stripped)
    if link is None:
        return None
    name, location = link
    return ClassifiedLine(kind=kind, name=name, location=location)


def read_link(text: str) -> tuple[str, str] | None:
    """Extract ``(name, location)`` from the first ``[name](location)`` in text."""
    open_bracket = text.find("[")
    if open_bracket == -1:
        logger.debug("'[' not found, not a link: %r", text)
        return None

    close_bracket = text.find("](", open_bracket)
    if close_bracket == -1:
        logger.debug("'](' not found, not a link: %r", text)
        return None

    close_paren = text.find(")", close_bracket + 2)
    if close_paren == -1:
        logger.debug("')' not found, not a link: %r", text)
        return None

    return text[open_bracket + 1 : close_bracket], text[close_bracket + 2 : close_paren]
