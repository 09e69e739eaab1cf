"""Aligned summary table — one row per language plus a pooled comment row.

Row layout::

    Python  12 (+  9 / -  3)  |  4 (+ 4 / - 0)

Widths are the widest formatted value per column across all rows. The
styled and plain renderings share one layout, so ``render(stats)`` is
always ``render_styled(stats).plain``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from rich.text import Text

from gitdiffloc.stats.models import ChangeCounters, DiffStats

TITLE = "Lines of Code Changes"
COMMENTS_LABEL = "Comments"
TOTAL_LABEL = "Total changes"
SEPARATOR_CHAR = "─"
_SEPARATOR_OVERHANG = 2  # separator runs two columns past the row

_TITLE_STYLE = "bold underline"
_COMMENT_NAME_STYLE = "bold magenta"
_LANGUAGE_NAME_STYLE = "bold cyan"

Segment = Tuple[str, Optional[str]]


@dataclass(frozen=True)
class ReportRow:
    name: str
    total: int
    added: int
    removed: int
    test_total: int
    test_added: int
    test_removed: int
    is_comment: bool = False

    @classmethod
    def from_counters(cls, name: str, counters: ChangeCounters, *, is_comment: bool = False) -> "ReportRow":
        return cls(
            name=name,
            total=counters.total,
            added=counters.added,
            removed=counters.removed,
            test_total=counters.test_total,
            test_added=counters.test_added,
            test_removed=counters.test_removed,
            is_comment=is_comment,
        )


@dataclass(frozen=True)
class _Widths:
    name: int
    total: int
    added: int
    removed: int
    test_total: int
    test_added: int
    test_removed: int

    @classmethod
    def of(cls, rows: List[ReportRow]) -> "_Widths":
        def widest(values) -> int:
            return max((len(str(v)) for v in values), default=0)

        return cls(
            name=widest(r.name for r in rows),
            total=widest(r.total for r in rows),
            added=widest(r.added for r in rows),
            removed=widest(r.removed for r in rows),
            test_total=widest(r.test_total for r in rows),
            test_added=widest(r.test_added for r in rows),
            test_removed=widest(r.test_removed for r in rows),
        )


def build_rows(stats: DiffStats) -> List[ReportRow]:
    """Comment row first (if any), then languages sorted by display name."""
    rows: List[ReportRow] = []

    if stats.comments.total > 0 or stats.comments.test_total > 0:
        rows.append(ReportRow.from_counters(COMMENTS_LABEL, stats.comments, is_comment=True))

    languages = sorted(stats.code.items(), key=lambda item: item[0].display_name)
    for language, counters in languages:
        if counters.total > 0 or counters.test_total > 0:
            rows.append(ReportRow.from_counters(language.display_name, counters))

    return rows


def _row_segments(row: ReportRow, w: _Widths) -> List[Segment]:
    name_style = _COMMENT_NAME_STYLE if row.is_comment else _LANGUAGE_NAME_STYLE
    return [
        (row.name.ljust(w.name), name_style),
        ("  ", None),
        (str(row.total).rjust(w.total), "yellow"),
        (" (", None),
        (f"+ {str(row.added).rjust(w.added)}", "green"),
        (" / ", None),
        (f"- {str(row.removed).rjust(w.removed)}", "red"),
        (")  |  ", None),
        (str(row.test_total).rjust(w.test_total), "bright_yellow"),
        (" (", None),
        (f"+ {str(row.test_added).rjust(w.test_added)}", "bright_green"),
        (" / ", None),
        (f"- {str(row.test_removed).rjust(w.test_removed)}", "bright_red"),
        (")", None),
    ]


def _layout(stats: DiffStats, show_header: bool) -> Iterator[List[Segment]]:
    """Yield the report one line at a time as styled segments."""
    rows = build_rows(stats)
    widths = _Widths.of(rows)

    if show_header:
        yield [(TITLE, _TITLE_STYLE)]
        yield []

    row_width = 0
    for row in rows:
        segments = _row_segments(row, widths)
        row_width = sum(len(text) for text, _ in segments)
        yield segments

    total = stats.total_changes
    if total > 0:
        yield []
        yield [(SEPARATOR_CHAR * (row_width + _SEPARATOR_OVERHANG), "bright_black")]
        yield [
            (TOTAL_LABEL.ljust(widths.name), "bold white"),
            ("  ", None),
            (str(total).rjust(widths.total), "bold yellow"),
        ]


def render_styled(stats: DiffStats, *, show_header: bool = True) -> Text:
    """Return the report as a Rich Text with cosmetic colours."""
    text = Text()
    for i, segments in enumerate(_layout(stats, show_header)):
        if i:
            text.append("\n")
        for chunk, style in segments:
            text.append(chunk, style=style or "")
    return text


def render(stats: DiffStats, *, show_header: bool = True) -> str:
    """Return the report as plain text. Does not modify *stats*."""
    return render_styled(stats, show_header=show_header).plain
