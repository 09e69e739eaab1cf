"""Reporters — aligned terminal table and JSON."""

from gitdiffloc.output.table import ReportRow, build_rows, render, render_styled

__all__ = [
    "ReportRow",
    "build_rows",
    "render",
    "render_styled",
]
