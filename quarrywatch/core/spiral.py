"""Square-spiral hole indexing.

Holes are numbered outward from the origin along a square spiral, then
sheared onto the excavation lattice so that neighbouring spiral cells do
not overlap under the tool's footprint::

    x = sx * 2 - sy
    y = sy * 2 + sx

The shear has determinant 5, so the mapping from hole index to lattice
position stays injective.
"""

from __future__ import annotations

from math import isqrt


def spiral_position(n: int) -> tuple[int, int]:
    """Return the square-spiral cell ``(sx, sy)`` of 1-based index *n*."""
    m = n - 1
    if m <= 0:
        return 0, 0

    # floor((sqrt(m) + 1) / 2) computed without floating point
    shell = (isqrt(m) + 1) // 2
    t = (2 * shell - 1) ** 2
    leg = (m - t) // (2 * shell)
    element = (m - t) - (2 * shell * leg) - shell + 1

    if leg == 0:
        return shell, element
    if leg == 1:
        return -element, shell
    if leg == 2:
        return -shell, -element
    return element, -shell


def map_index_to_position(n: int) -> tuple[int, int]:
    """Map a 1-based hole index to its ``(x, y)`` lattice position.

    Parameters
    ----------
    n:
        Hole index, starting at 1 for the origin hole.

    Returns
    -------
    tuple[int, int]
        The hole's lattice coordinates.  ``map_index_to_position(1)`` is
        ``(0, 0)``.
    """
    sx, sy = spiral_position(n)
    return sx * 2 - sy, sy * 2 + sx
