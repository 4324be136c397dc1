"""``quarrywatch locate N`` — show where hole N sits on the lattice."""

from __future__ import annotations

import typer
from rich.console import Console

from quarrywatch.core.spiral import map_index_to_position, spiral_position

console = Console()


def locate_cmd(
    hole: int = typer.Argument(..., min=1, help="1-based hole index."),
) -> None:
    """Print the lattice position (and underlying spiral cell) of a hole."""
    x, y = map_index_to_position(hole)
    sx, sy = spiral_position(hole)
    console.print(f"[bold]Hole {hole}:[/bold] {x},{y}  [dim](spiral {sx},{sy})[/dim]")
