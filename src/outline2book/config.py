"""Local configuration for outline2book."""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_SPACES_PER_LEVEL = 4
DEFAULT_CREATE_MISSING = True
DEFAULT_OUTLINE_FILENAME = "SUMMARY.md"

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def parse_spaces_per_level(value: str | int) -> int:
    """Validate an indentation width; it must be a positive integer."""
    try:
        spaces = int(value)
    except ValueError as exc:
        raise ValueError(f"spaces per level must be an integer, got {value!r}") from exc
    if spaces < 1:
        raise ValueError(f"spaces per level must be at least 1, got {spaces}")
    return spaces


OUTLINE2BOOK_SPACES_PER_LEVEL = parse_spaces_per_level(
    os.getenv("OUTLINE2BOOK_SPACES_PER_LEVEL", str(DEFAULT_SPACES_PER_LEVEL))
)
OUTLINE2BOOK_CREATE_MISSING = env_flag("OUTLINE2BOOK_CREATE_MISSING", DEFAULT_CREATE_MISSING)
OUTLINE2BOOK_OUTLINE_FILENAME = os.getenv("OUTLINE2BOOK_OUTLINE_FILENAME", DEFAULT_OUTLINE_FILENAME)
# Unset leaves logging to the application.
OUTLINE2BOOK_LOG_LEVEL = os.getenv("OUTLINE2BOOK_LOG_LEVEL")


@dataclass
class BuildOptions:
    """Options for loading a book.

    Attributes:
        create_missing: If True, create stub files for chapters whose
            target does not exist before loading.
        spaces_per_level: Number of spaces making up one indentation level
            in the outline.
        outline_filename: Name of the outline file inside the content root.
    """

    create_missing: bool = OUTLINE2BOOK_CREATE_MISSING
    spaces_per_level: int = OUTLINE2BOOK_SPACES_PER_LEVEL
    outline_filename: str = OUTLINE2BOOK_OUTLINE_FILENAME
