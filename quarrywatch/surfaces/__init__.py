"""Render targets for Quarrywatch.

Two kinds of surface receive output:

``TextSurface``
    A line-oriented text target (the statistics readout).
``DisplaySurface``
    A character-cell display with a cursor and a scale factor (the map).

Surfaces are owned by exactly one renderer each; no surface is shared
between loops.
"""

from quarrywatch.surfaces.base import DisplaySurface, PresentableSurface, TextSurface
from quarrywatch.surfaces.console import RichConsoleSurface
from quarrywatch.surfaces.grid import CharGridSurface, FileGridSurface

__all__ = [
    "CharGridSurface",
    "DisplaySurface",
    "FileGridSurface",
    "PresentableSurface",
    "RichConsoleSurface",
    "TextSurface",
]
