"""Text surface backed by a Rich console."""

from __future__ import annotations

from rich.console import Console
from rich.control import Control


class RichConsoleSurface:
    """Writes the statistics readout to a terminal through Rich.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def clear(self) -> None:
        self.console.clear(home=True)

    def move_cursor(self, row: int, col: int) -> None:
        if self.console.is_terminal:
            self.console.control(Control.move_to(col, row))

    def write_line(self, text: str) -> None:
        self.console.print(
            text,
            markup=False,
            highlight=False,
            no_wrap=True,
            overflow="crop",
        )
