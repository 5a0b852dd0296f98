"""Labeled grid representation.

This module defines the grid domain model: a rectangular block of cells,
each carrying a single-character plant label.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from plotfence.domain.point import Point


@dataclass(frozen=True)
class Grid:
    """A rectangular mapping from points to labels.

    Every point with 0 <= row < rows and 0 <= col < cols has exactly one
    label. Grids are normally built by the parser, which enforces this.

    Attributes:
        cells: Read-only mapping from Point to label
        rows: Number of rows
        cols: Number of columns
    """

    cells: Mapping[Point, str] = field(hash=False)
    rows: int
    cols: int
    _labels: frozenset[str] = field(
        default=frozenset(), repr=False, init=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))
        object.__setattr__(self, "_labels", frozenset(self.cells.values()))

    @classmethod
    def from_rows(cls, rows: list[str]) -> "Grid":
        """Build a grid from equal-length label strings.

        No validation is done here; use the parser for untrusted text.

        Args:
            rows: One string per row, one character per cell

        Returns:
            Grid instance
        """
        cells = {
            Point(r, c): label
            for r, line in enumerate(rows)
            for c, label in enumerate(line)
        }
        return cls(cells=cells, rows=len(rows), cols=len(rows[0]) if rows else 0)

    def label_at(self, point: Point) -> str | None:
        """Get the label at a point, or None outside the grid."""
        return self.cells.get(point)

    def points(self) -> Iterator[Point]:
        """Iterate over all points in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Point(row, col)

    def labels(self) -> frozenset[str]:
        """Get the distinct labels present in the grid."""
        return self._labels

    def __contains__(self, point: object) -> bool:
        return point in self.cells

    def __len__(self) -> int:
        return len(self.cells)
