"""Surface protocols — the capabilities renderers draw through."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSurface(Protocol):
    """Line-oriented text output."""

    def clear(self) -> None:
        ...

    def move_cursor(self, row: int, col: int) -> None:
        ...

    def write_line(self, text: str) -> None:
        """Write *text* at the cursor and move to the start of the next row."""
        ...


@runtime_checkable
class DisplaySurface(Protocol):
    """A scalable character-cell display.

    Coordinates are 0-based columns (``x``) and rows (``y``).  ``get_size``
    reports the addressable area at the current scale.
    """

    def clear(self) -> None:
        ...

    def set_cursor(self, x: int, y: int) -> None:
        ...

    def plot(self, char: str) -> None:
        ...

    def get_size(self) -> tuple[int, int]:
        ...

    def set_scale(self, factor: float) -> None:
        ...


@runtime_checkable
class PresentableSurface(Protocol):
    """A display that buffers plots until told to show them."""

    def present(self) -> None:
        ...
