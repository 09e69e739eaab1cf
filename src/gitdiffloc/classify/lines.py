"""Comment vs code classification for a single trimmed line."""

from __future__ import annotations

from enum import Enum

from gitdiffloc.classify.language import Language


class LineCategory(str, Enum):
    CODE = "code"
    COMMENT = "comment"


def is_blank(trimmed: str) -> bool:
    """True for empty lines and lines without a single alphanumeric character."""
    return not any(ch.isalnum() for ch in trimmed)


def classify_line(trimmed_line: str, language: Language) -> LineCategory:
    """Return COMMENT when the line starts with one of the language's prefixes.

    Only whole-line comments are recognised; ``x = 1  # note`` is code.
    """
    for prefix in language.comment_prefixes:
        if trimmed_line.startswith(prefix):
            return LineCategory.COMMENT
    return LineCategory.CODE
