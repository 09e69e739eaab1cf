"""Fold parsed diff lines into per-language and comment counters."""

from __future__ import annotations

from typing import Optional

from gitdiffloc.classify.language import language_for_path
from gitdiffloc.classify.lines import LineCategory, classify_line, is_blank
from gitdiffloc.classify.test_paths import is_test_path
from gitdiffloc.git.diff_parser import DiffParser
from gitdiffloc.git.models import DiffFile, DiffLine
from gitdiffloc.stats.models import DiffStats


def count_line(line: DiffLine, stats: DiffStats) -> Optional[LineCategory]:
    """Classify one content line and bump the matching counter.

    Returns the category that was counted, or None when the line carries
    no alphanumeric character and is ignored.
    """
    trimmed = line.content.strip()
    if is_blank(trimmed):
        return None

    language = language_for_path(line.file)
    category = classify_line(trimmed, language)
    is_test = is_test_path(line.file)

    if category is LineCategory.COMMENT:
        counters = stats.comments
    else:
        counters = stats.counters_for(language)
    counters.record(is_added=line.is_added, is_test=is_test)
    return category


def parse(diff_text: str) -> DiffStats:
    """Run the full parse-and-classify pipeline over *diff_text*."""
    stats = DiffStats()
    for item in DiffParser(diff_text).parse():
        if isinstance(item, DiffFile):
            if item.path is not None:
                stats.files_seen += 1
        else:
            count_line(item, stats)
    return stats
