"""Data models for diff parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ChangeType(str, Enum):
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class DiffLine:
    """An added or removed content line, without its leading marker."""

    file: str
    content: str
    change_type: ChangeType

    @property
    def is_added(self) -> bool:
        return self.change_type is ChangeType.ADDED


@dataclass(frozen=True)
class DiffFile:
    """A ``diff --git`` header. ``path`` is None when the header is malformed."""

    path: Optional[str]
