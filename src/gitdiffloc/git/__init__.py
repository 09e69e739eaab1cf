"""Git interface layer — adapter, diff parsing, models."""

from gitdiffloc.git.adapter import GitError, get_diff, get_repo_root
from gitdiffloc.git.diff_parser import DiffParser, extract_file_path
from gitdiffloc.git.models import ChangeType, DiffFile, DiffLine

__all__ = [
    "ChangeType",
    "DiffFile",
    "DiffLine",
    "DiffParser",
    "GitError",
    "extract_file_path",
    "get_diff",
    "get_repo_root",
]
