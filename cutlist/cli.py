"""
cutlist.cli - Typer CLI entry point.

Provides the subcommands for extracting and rendering sequence audits.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cutlist import __version__
from cutlist.config import (
    CONFIG_FILENAME,
    AuditConfig,
    create_default_config,
    load_config,
    write_config,
)
from cutlist.exceptions import (
    ConfigError,
    ExtractionError,
    MalformedPayloadError,
    SnapshotError,
)
from cutlist.extract import extract_audit, run_extraction
from cutlist.host.snapshot import load_snapshot
from cutlist.io import read_text, write_text
from cutlist.logging import configure_logging
from cutlist.models import AuditFailure, SequenceAudit
from cutlist.payload import decode_payload, encode_outcome
from cutlist.reports.acts import assign_act, reportable_clips
from cutlist.reports.audit import render_audit
from cutlist.reports.markdown import frames_to_seconds
from cutlist.timecode import frames_to_timecode

app = typer.Typer(
    name="cutlist",
    help="Timeline audit reports for video edits.\n\n"
    "Extracts clip text and frame timing from a sequence and renders an "
    "act-segmented Markdown cut list.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"cutlist {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Cutlist - timeline audit reports for video edits."""
    configure_logging(verbose)


def _load_config_or_exit(config_path: str | None) -> AuditConfig:
    try:
        return load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _extract_or_exit(snapshot: str, config: AuditConfig) -> SequenceAudit:
    try:
        project = load_snapshot(Path(snapshot))
        return extract_audit(project, config)
    except (SnapshotError, ExtractionError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _emit(markdown: str, output: str | None) -> None:
    if output:
        output_path = Path(output)
        write_text(output_path, markdown)
        console.print(f"[green]✓[/green] Wrote {output_path}")
    else:
        typer.echo(markdown, nl=False)


@app.command("init")
def init_config(
    path: str = typer.Option(".", "--path", "-d", help="Directory to write cutlist.yaml in"),
    title: str | None = typer.Option(None, "--title", "-t", help="Report title"),
) -> None:
    """Write a default cutlist.yaml with the built-in act table."""
    config_path = Path(path) / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[red]Error: {CONFIG_FILENAME} already exists in {escape(path)}[/red]")
        raise typer.Exit(1)

    config = create_default_config(title) if title else create_default_config()
    write_config(config, config_path)
    console.print(f"[green]✓[/green] Created {config_path}")


@app.command("audit")
def audit_sequence(
    snapshot: str = typer.Argument(..., help="Sequence snapshot (YAML or JSON)"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write Markdown to file"),
    config_path: str | None = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Extract a sequence audit and render it as Markdown."""
    config = _load_config_or_exit(config_path)
    audit = _extract_or_exit(snapshot, config)
    _emit(render_audit(audit, acts=config.acts, title=config.title), output)


@app.command("extract")
def extract_sequence(
    snapshot: str = typer.Argument(..., help="Sequence snapshot (YAML or JSON)"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write payload to file"),
    config_path: str | None = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Extract a sequence audit and emit the JSON payload.

    Failures are emitted as an error payload and exit with status 1.
    Status and error messages go to stderr; stdout carries only the payload.
    """
    config = _load_config_or_exit(config_path)
    try:
        project = load_snapshot(Path(snapshot))
    except SnapshotError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    outcome = run_extraction(project, config)
    payload = encode_outcome(outcome)

    if output:
        write_text(Path(output), payload + "\n")
    else:
        typer.echo(payload)

    if isinstance(outcome, AuditFailure):
        err_console.print(f"[red]Error: {escape(outcome.message)}[/red]")
        raise typer.Exit(1)
    if output:
        err_console.print(f"[green]✓[/green] Extracted {len(outcome.clips)} clips to {output}")


@app.command("render")
def render_payload(
    payload_file: str = typer.Argument(..., help="Extractor payload file"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write Markdown to file"),
    config_path: str | None = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Render Markdown from a previously extracted payload."""
    config = _load_config_or_exit(config_path)

    path = Path(payload_file)
    if not path.exists():
        console.print(f"[red]Error: Payload not found: {path}[/red]")
        raise typer.Exit(1)

    raw = read_text(path).strip()
    try:
        outcome = decode_payload(raw)
    except MalformedPayloadError as e:
        console.print("[red]Error: Could not parse extractor result.[/red]")
        console.print(f"[dim]{escape(e.message)}[/dim]")
        raise typer.Exit(1)

    if isinstance(outcome, AuditFailure):
        console.print(f"[red]Error: {escape(outcome.message)}[/red]")
        raise typer.Exit(1)

    _emit(render_audit(outcome, acts=config.acts, title=config.title), output)


@app.command("clips")
def list_clips(
    snapshot: str = typer.Argument(..., help="Sequence snapshot (YAML or JSON)"),
    config_path: str | None = typer.Option(None, "--config", "-c", help="Config file path"),
    drop_frame: bool = typer.Option(
        False, "--drop-frame", help="Use drop-frame timecode at 29.97fps"
    ),
) -> None:
    """Show extracted clips with act assignment and timecodes."""
    config = _load_config_or_exit(config_path)
    audit = _extract_or_exit(snapshot, config)
    fps = audit.frame_rate

    table = Table(title=f"Clips ({fps or 0:.3f} fps)")
    table.add_column("#", justify="right")
    table.add_column("Act", style="magenta")
    table.add_column("Text", style="cyan")
    table.add_column("Track", justify="right")
    table.add_column("In", style="green")
    table.add_column("Out", style="green")
    table.add_column("Duration", justify="right")

    clips = reportable_clips(audit.clips)
    for number, clip in enumerate(clips, start=1):
        act = config.acts[assign_act(clip.start_frame, config.acts)]
        table.add_row(
            str(number),
            escape(act.name),
            escape(clip.label),
            f"V{clip.track_index}",
            frames_to_timecode(clip.start_frame, fps, drop_frame),
            frames_to_timecode(clip.end_frame, fps, drop_frame),
            f"{clip.duration_frames}f ({frames_to_seconds(clip.duration_frames, fps)})",
        )

    console.print(table)
    console.print(
        f"\n{len(clips)} clip(s), {audit.total_duration_frames} frames "
        f"({frames_to_seconds(audit.total_duration_frames, fps)})"
    )


@app.command("acts")
def show_acts(
    config_path: str | None = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Show the configured act table."""
    config = _load_config_or_exit(config_path)

    table = Table(title="Acts")
    table.add_column("Act", style="cyan")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Frames", justify="right")

    for act in config.acts:
        table.add_row(escape(act.name), str(act.start), str(act.end), str(act.duration_frames))

    console.print(table)
    if config.config_path:
        console.print(f"[dim]  from {config.config_path}[/dim]")


if __name__ == "__main__":
    app()
