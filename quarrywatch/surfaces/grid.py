"""In-memory character-cell displays.

``CharGridSurface`` models a display with a fixed physical size whose
addressable area shrinks as the scale grows: at scale ``s`` a
``width x height`` panel exposes ``floor(width / s) x floor(height / s)``
cells.  ``FileGridSurface`` additionally writes its rows to a text file
whenever a render pass is presented.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

logger = logging.getLogger(__name__)


class CharGridSurface:
    """A scalable character display held in memory.

    Parameters
    ----------
    width, height:
        Addressable size at scale 1.
    name:
        Label used in log messages.
    """

    def __init__(self, width: int, height: int, *, name: str = "grid") -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.name = name
        self._base_width = width
        self._base_height = height
        self._scale = 1.0
        self._cells: dict[tuple[int, int], str] = {}
        self._cursor = (0, 0)

    @property
    def scale(self) -> float:
        return self._scale

    def clear(self) -> None:
        self._cells.clear()

    def set_cursor(self, x: int, y: int) -> None:
        self._cursor = (x, y)

    def plot(self, char: str) -> None:
        """Write *char* at the cursor and advance one column."""
        x, y = self._cursor
        width, height = self.get_size()
        if 0 <= x < width and 0 <= y < height:
            self._cells[(x, y)] = char[:1] or " "
        self._cursor = (x + 1, y)

    def get_size(self) -> tuple[int, int]:
        return (
            max(1, math.floor(self._base_width / self._scale)),
            max(1, math.floor(self._base_height / self._scale)),
        )

    def set_scale(self, factor: float) -> None:
        if factor <= 0:
            raise ValueError(f"Scale must be positive, got {factor}")
        self._scale = factor

    def char_at(self, x: int, y: int) -> str:
        return self._cells.get((x, y), " ")

    def lines(self) -> list[str]:
        """Rendered rows, trailing blanks stripped."""
        width, height = self.get_size()
        return [
            "".join(self.char_at(x, y) for x in range(width)).rstrip()
            for y in range(height)
        ]


class FileGridSurface(CharGridSurface):
    """A ``CharGridSurface`` mirrored to a text file after each pass."""

    def __init__(self, path: Path | str, width: int, height: int) -> None:
        self.path = Path(path)
        super().__init__(width, height, name=self.path.name)

    def present(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("\n".join(self.lines()) + "\n", encoding="utf-8")
        logger.debug("Wrote map to %s", self.path)
