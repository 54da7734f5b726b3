"""stylishdiff CLI — Typer application with render and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from stylishdiff import __version__

app = typer.Typer(
    name="stylishdiff",
    help="Render lint diagnostics as an aligned terminal report.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


# ── render ────────────────────────────────────────────────────────────────────


@app.command()
def render(
    source: Optional[str] = typer.Argument(None, help="Results JSON file, or - for stdin"),
    diff_only: bool = typer.Option(False, "--diff-only", help="Only report diagnostics in the diff"),
    color: Optional[str] = typer.Option(None, "--color", help="Color mode: auto | always | never"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .stylishdiff.toml"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Render a batch of analysis results."""
    from stylishdiff.config.loader import ConfigError, load_config
    from stylishdiff.config.schema import COLOR_MODES
    from stylishdiff.output.styles import Styler, detect_color
    from stylishdiff.report.engine import build_report
    from stylishdiff.report.variants import get_variant
    from stylishdiff.results.loader import ResultsError, load_results

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if diff_only:
        cfg.output.variant = "diff-only"
    if color:
        if color not in COLOR_MODES:
            console.print(f"[bold red]Invalid color mode:[/bold red] {color}")
            raise typer.Exit(code=2)
        cfg.output.color = color  # type: ignore[assignment]

    # A report written to a file is uncoloured unless explicitly forced
    if output and cfg.output.color == "auto":
        use_color = False
    else:
        use_color = detect_color(cfg.output.color)

    # --- Load results ---
    try:
        results = load_results(source)
    except ResultsError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Results loaded: {len(results)} files[/dim]")
        console.print(f"[dim]Variant: {cfg.output.variant}[/dim]")
        console.print(f"[dim]Color: {use_color}[/dim]")

    # --- Render ---
    styler = Styler(cfg.styles, color=use_color)
    report = build_report(results, get_variant(cfg.output.variant), styler)

    if verbose:
        console.print(
            f"[dim]Files reported: {report.totals.files}, "
            f"problems: {report.counts.total}[/dim]"
        )

    if output:
        Path(output).write_text(report.text, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")
    elif report.text:
        typer.echo(report.text, nl=False, color=use_color)

    # --- Exit code ---
    if report.counts.errors > 0:
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .stylishdiff.toml in the current directory."""
    from stylishdiff.config.defaults import DEFAULT_TOML
    from stylishdiff.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"stylishdiff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """stylishdiff — lint diagnostics as an aligned terminal report."""
