"""git-diff-loc CLI — Typer application with count, report, and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gitdiffloc import __version__

app = typer.Typer(
    name="git-diff-loc",
    help="Count lines of code changes between two git commits.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from gitdiffloc.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load_config(root: Path, config: Optional[str], format: Optional[str]):
    """Load config and apply the --format override, exit 2 on failure."""
    from gitdiffloc.config.loader import ConfigError, load_config
    from gitdiffloc.config.schema import OUTPUT_FORMATS

    try:
        cfg = load_config(root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    return cfg


def _emit(
    diff_text: str,
    cfg,
    *,
    output: Optional[str],
    verbose: bool,
    from_ref: Optional[str] = None,
    to_ref: Optional[str] = None,
) -> None:
    """Parse *diff_text*, print the report, and optionally write JSON to *output*."""
    from gitdiffloc.output import json_report, terminal
    from gitdiffloc.stats.aggregator import parse

    stats = parse(diff_text)

    if verbose:
        console.print(f"[dim]Files changed: {stats.files_seen}[/dim]")

    report_text: Optional[str] = None

    if cfg.output.format == "json":
        report_text = json_report.render(stats, from_ref=from_ref, to_ref=to_ref)
        print(report_text)
    else:
        terminal.render(stats, show_header=cfg.output.show_header)

    if output:
        if report_text is None:
            report_text = json_report.render(stats, from_ref=from_ref, to_ref=to_ref)
        try:
            Path(output).write_text(report_text + "\n", encoding="utf-8")
        except OSError as exc:
            console.print(f"[bold red]Error:[/bold red] cannot write {output}: {exc}")
            raise typer.Exit(code=2) from exc
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")


# ── count ─────────────────────────────────────────────────────────────────────


@app.command()
def count(
    commit_from: str = typer.Argument(..., metavar="FROM", help="Base revision"),
    commit_to: str = typer.Argument(..., metavar="TO", help="Target revision"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitdiffloc.toml (or .yaml)"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    ignore_whitespace: bool = typer.Option(False, "--ignore-whitespace", "-w", help="Ignore whitespace-only changes"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Count code and comment line changes between two revisions."""
    from gitdiffloc.git.adapter import GitError, get_diff

    repo_root = _resolve_repo_root()
    cfg = _load_config(repo_root, config, format)

    if ignore_whitespace:
        cfg.git.ignore_whitespace = True

    if verbose:
        console.print(f"[dim]Repo root: {repo_root}[/dim]")
        console.print(f"[dim]Config: {cfg.source or 'defaults'}[/dim]")
        console.print(f"[dim]Range: {commit_from} → {commit_to}[/dim]")

    try:
        diff_text = get_diff(
            repo_root,
            commit_from,
            commit_to,
            ignore_whitespace=cfg.git.ignore_whitespace,
            timeout=cfg.git.timeout,
        )
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    _emit(diff_text, cfg, output=output, verbose=verbose, from_ref=commit_from, to_ref=commit_to)


# ── report ────────────────────────────────────────────────────────────────────


@app.command()
def report(
    diff_file: str = typer.Argument(..., metavar="DIFF_FILE", help="Unified diff file, or - for stdin"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitdiffloc.toml (or .yaml)"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Summarise an existing unified diff instead of running git."""
    from gitdiffloc.git.adapter import GitError, get_repo_root

    try:
        root = get_repo_root()
    except GitError:
        root = Path.cwd()
    cfg = _load_config(root, config, format)

    if verbose:
        console.print(f"[dim]Config: {cfg.source or 'defaults'}[/dim]")

    # Undecodable path bytes survive as surrogates and classify as Unknown.
    try:
        if diff_file == "-":
            diff_text = sys.stdin.buffer.read().decode("utf-8", errors="surrogateescape")
        else:
            diff_text = Path(diff_file).read_bytes().decode("utf-8", errors="surrogateescape")
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] cannot read {diff_file}: {exc}")
        raise typer.Exit(code=2) from exc

    _emit(diff_text, cfg, output=output, verbose=verbose)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitdiffloc.toml in the repo root."""
    from gitdiffloc.config.defaults import DEFAULT_TOML
    from gitdiffloc.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"git-diff-loc {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """git-diff-loc — count code and comment line changes between git revisions."""
