"""Unified diff parser — tracks the current file and yields content lines.

Only three kinds of line matter: ``diff --git`` headers, which switch the
current file, and ``+``/``-`` content lines. The ``+++``/``---`` path
markers, hunk headers, context lines and all other metadata are skipped.
"""

from __future__ import annotations

from typing import Generator, Optional

from gitdiffloc.git.models import ChangeType, DiffFile, DiffLine

_DIFF_HEADER = "diff --git "
_NEW_FILE_MARKER = "+++"
_OLD_FILE_MARKER = "---"
_NEW_SIDE_PREFIX = "b/"


def extract_file_path(header: str) -> Optional[str]:
    """Return the new-side path of a ``diff --git a/x b/x`` header.

    The path is the fourth whitespace-separated token with its ``b/``
    prefix removed. Headers with fewer tokens yield None.
    """
    parts = header.split()
    if len(parts) < 4:
        return None
    path = parts[3]
    while path.startswith(_NEW_SIDE_PREFIX):
        path = path[len(_NEW_SIDE_PREFIX):]
    return path


class DiffParser:
    """Parse unified diff text and yield DiffFile / DiffLine objects.

    Usage::

        parser = DiffParser(diff_text)
        for item in parser.parse():
            if isinstance(item, DiffFile):
                ...
            elif isinstance(item, DiffLine):
                ...

    Content lines seen before the first header, or after a malformed
    one, have no file to belong to and are dropped.
    """

    def __init__(self, diff_text: str) -> None:
        # Split on "\n" only; form feeds and U+2028 are ordinary content.
        self._lines = [
            line[:-1] if line.endswith("\r") else line
            for line in diff_text.split("\n")
        ]

    def parse(self) -> Generator[DiffFile | DiffLine, None, None]:
        current_file: Optional[str] = None

        for raw_line in self._lines:
            if raw_line.startswith(_DIFF_HEADER):
                current_file = extract_file_path(raw_line)
                yield DiffFile(path=current_file)
                continue

            if raw_line.startswith("+") and not raw_line.startswith(_NEW_FILE_MARKER):
                change_type = ChangeType.ADDED
            elif raw_line.startswith("-") and not raw_line.startswith(_OLD_FILE_MARKER):
                change_type = ChangeType.REMOVED
            else:
                continue

            if current_file is None:
                continue

            yield DiffLine(
                file=current_file,
                content=raw_line[1:],
                change_type=change_type,
            )
