"""Change counter data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from gitdiffloc.classify.language import Language


@dataclass
class ChangeCounters:
    """Added/removed line counts, split into production and test scope."""

    added: int = 0
    removed: int = 0
    test_added: int = 0
    test_removed: int = 0

    @property
    def total(self) -> int:
        return self.added + self.removed

    @property
    def test_total(self) -> int:
        return self.test_added + self.test_removed

    @property
    def grand_total(self) -> int:
        return self.total + self.test_total

    def record(self, *, is_added: bool, is_test: bool) -> None:
        """Increment exactly one of the four counters."""
        if is_test:
            if is_added:
                self.test_added += 1
            else:
                self.test_removed += 1
        elif is_added:
            self.added += 1
        else:
            self.removed += 1


@dataclass
class DiffStats:
    """Accumulated counts for one diff.

    ``code`` only gains a key once a code line of that language is recorded.
    Comment lines are pooled across languages.
    """

    code: Dict[Language, ChangeCounters] = field(default_factory=dict)
    comments: ChangeCounters = field(default_factory=ChangeCounters)
    files_seen: int = 0

    def counters_for(self, language: Language) -> ChangeCounters:
        return self.code.setdefault(language, ChangeCounters())

    @property
    def total_code(self) -> int:
        return sum(c.total for c in self.code.values())

    @property
    def total_test(self) -> int:
        return sum(c.test_total for c in self.code.values())

    @property
    def total_comments(self) -> int:
        """Production comment lines; test comments show in the row but not the total."""
        return self.comments.total

    @property
    def total_changes(self) -> int:
        return self.total_code + self.total_test + self.total_comments
