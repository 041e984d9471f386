"""Sector geometry table. No builder imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

SECTOR_COUNT = 8

_D = math.sqrt(0.5)

# Columns: line_x, line_y, arc_x, arc_y. Unit vectors 45° apart starting at
# -90° (top), clockwise in SVG's y-down space. Row i's arc endpoint is
# row i+1's line endpoint.
PATHS_PROPERTIES: NDArray[np.float64] = np.array(
    [
        [0.0, -1.0, _D, -_D],
        [_D, -_D, 1.0, 0.0],
        [1.0, 0.0, _D, _D],
        [_D, _D, 0.0, 1.0],
        [0.0, 1.0, -_D, _D],
        [-_D, _D, -1.0, 0.0],
        [-1.0, 0.0, -_D, -_D],
        [-_D, -_D, -0.0, -1.0],
    ],
    dtype=np.float64,
)
PATHS_PROPERTIES.setflags(write=False)


def sector(index: int, divider: float) -> tuple[float, float, float, float]:
    """Scaled (line_x, line_y, arc_x, arc_y) for one sector of a ring."""
    line_x, line_y, arc_x, arc_y = PATHS_PROPERTIES[index] * divider
    return (float(line_x), float(line_y), float(arc_x), float(arc_y))
