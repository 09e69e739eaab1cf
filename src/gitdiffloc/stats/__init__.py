"""Change statistics — counters and the diff aggregator."""

from gitdiffloc.stats.aggregator import count_line, parse
from gitdiffloc.stats.models import ChangeCounters, DiffStats

__all__ = [
    "ChangeCounters",
    "DiffStats",
    "count_line",
    "parse",
]
