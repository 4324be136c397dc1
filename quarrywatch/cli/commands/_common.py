"""Helpers shared by the one-shot commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from quarrywatch.models.jobs import JobStateSnapshot
from quarrywatch.sources.json_file import JsonFileSnapshotSource


def load_snapshot_or_exit(state_path: Path, console: Console) -> JobStateSnapshot:
    """Read one snapshot from *state_path*, exiting with code 1 if there is none."""
    if not state_path.exists():
        console.print(f"[bold red]State file not found:[/bold red] {state_path}")
        console.print("[dim]Point --state at the controller's job-state file.[/dim]")
        raise typer.Exit(code=1)

    snapshot = JsonFileSnapshotSource(state_path).fetch()
    if snapshot is None:
        console.print(f"[bold red]No valid snapshot in:[/bold red] {state_path}")
        raise typer.Exit(code=1)
    return snapshot
