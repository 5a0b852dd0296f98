"""Domain models for plotfence.

This module contains the core domain models representing grid cells,
labeled grids and the regions (plots) carved out of them. All models are:

- Immutable (frozen dataclasses, frozensets)
- Hashable by value, so regions can be compared as sets
- Independent of how the grid text was obtained

Key classes:
- Direction: One of the four edge directions of a grid cell
- Point: A (row, col) grid coordinate
- Grid: A rectangular mapping from points to labels
- Region: A maximal 4-connected set of same-label points
"""

from plotfence.domain.grid import Grid
from plotfence.domain.point import Direction, Point
from plotfence.domain.region import Region

__all__: list[str] = [
    # Enums
    "Direction",
    # Core types
    "Point",
    "Grid",
    "Region",
]
