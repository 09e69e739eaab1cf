"""Git subprocess wrapper — repository root and revision diffs."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = 60) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(f"git {args[0]} failed: {stderr or f'exit status {result.returncode}'}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def diff_args(
    commit_from: str,
    commit_to: str,
    *,
    ignore_whitespace: bool = False,
) -> list[str]:
    """Build the ``git diff`` argument list for a revision pair."""
    args = ["diff", "--no-color", "--no-ext-diff"]
    if ignore_whitespace:
        args.append("--ignore-all-space")
    args.extend([commit_from, commit_to, "--"])
    return args


def get_diff(
    repo_root: Path,
    commit_from: str,
    commit_to: str,
    *,
    ignore_whitespace: bool = False,
    timeout: int = 60,
) -> str:
    """Return the unified diff between two revisions."""
    return _run_git(
        diff_args(commit_from, commit_to, ignore_whitespace=ignore_whitespace),
        cwd=repo_root,
        timeout=timeout,
    )
