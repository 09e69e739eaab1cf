"""Rich terminal reporter."""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from gitdiffloc.output.table import render_styled
from gitdiffloc.stats.models import DiffStats


def render(
    stats: DiffStats,
    *,
    show_header: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print the summary table to stdout using Rich."""
    console = console or Console()
    console.print()
    console.print(render_styled(stats, show_header=show_header), highlight=False, soft_wrap=True)
