"""Grid coordinates and edge directions.

This module defines the fundamental grid types used throughout plotfence:
- Direction: Enum for the four edges of a cell
- Point: An immutable (row, col) coordinate
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Edge direction of a grid cell.

    Each member's value is the (d_row, d_col) step to the neighbor on that
    side. Rows grow downward and columns grow to the right.
    """

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> tuple[int, int]:
        """Get the (d_row, d_col) step for this direction."""
        return self.value

    @property
    def perpendicular(self) -> tuple[int, int]:
        """Get the unit step along which edges facing this way line up.

        Top and bottom edges run along a row (step one column), left and
        right edges run along a column (step one row).

        Returns:
            Tuple of (d_row, d_col) with non-negative components
        """
        d_row, d_col = self.value
        return (abs(d_col), abs(d_row))


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """A cell coordinate on the grid.

    Immutable and hashable for use in sets/dicts. Ordering is row-major.

    Attributes:
        row: Row index (0 at the top)
        col: Column index (0 at the left)
    """

    row: int
    col: int

    def neighbor(self, direction: Direction) -> "Point":
        """Get the adjacent point in the given direction.

        The result may lie outside any grid; callers check membership.

        Args:
            direction: Side of this cell to step across

        Returns:
            The 4-adjacent point
        """
        d_row, d_col = direction.delta
        return Point(self.row + d_row, self.col + d_col)

    def neighbors(self) -> Iterator["Point"]:
        """Iterate over the four 4-adjacent points."""
        for direction in Direction:
            yield self.neighbor(direction)

    def shifted(self, d_row: int, d_col: int) -> "Point":
        """Get the point offset by (d_row, d_col)."""
        return Point(self.row + d_row, self.col + d_col)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (row, col) tuple.

        Returns:
            Tuple of (row, col) coordinates
        """
        return (self.row, self.col)
