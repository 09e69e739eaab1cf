"""JSON reporter for scripts and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from gitdiffloc.output.table import build_rows
from gitdiffloc.stats.models import ChangeCounters, DiffStats


def _counters(c: ChangeCounters) -> Dict[str, int]:
    return {
        "total": c.total,
        "added": c.added,
        "removed": c.removed,
        "test_total": c.test_total,
        "test_added": c.test_added,
        "test_removed": c.test_removed,
    }


def to_dict(
    stats: DiffStats,
    *,
    from_ref: Optional[str] = None,
    to_ref: Optional[str] = None,
) -> Dict[str, Any]:
    """Convert DiffStats to a JSON-serialisable dict."""
    languages: List[Dict[str, Any]] = []
    for row in build_rows(stats):
        if row.is_comment:
            continue
        languages.append({
            "name": row.name,
            "total": row.total,
            "added": row.added,
            "removed": row.removed,
            "test_total": row.test_total,
            "test_added": row.test_added,
            "test_removed": row.test_removed,
        })

    return {
        "version": "1.0",
        **({"from": from_ref} if from_ref else {}),
        **({"to": to_ref} if to_ref else {}),
        "files_changed": stats.files_seen,
        "languages": languages,
        "comments": _counters(stats.comments),
        "total_changes": stats.total_changes,
    }


def render(
    stats: DiffStats,
    *,
    from_ref: Optional[str] = None,
    to_ref: Optional[str] = None,
) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(stats, from_ref=from_ref, to_ref=to_ref), indent=2)
