"""Boundary metrics for regions.

Two measures of how much fence a region needs:

- perimeter: the number of unit cell edges between a member cell and a
  non-member cell (cells outside the grid count as non-members)
- sides: the number of maximal straight runs of boundary, which is also
  the number of corners of the boundary, holes included

Sides are counted per edge direction. A cell is exposed in a direction
when its neighbor that way is outside the region. Exposed edges facing the
same way form a side while they sit on consecutive cells along the
perpendicular axis, so every exposed cell whose predecessor on that axis is
not exposed the same way starts a new side. Contiguity is tested against
the actual adjacent cell, so two collinear runs with a gap between them
count as two sides.
"""

from dataclasses import dataclass
from typing import Any

from plotfence.domain import Direction, Point, Region


@dataclass(frozen=True)
class RegionMetrics:
    """Fence measurements of one region.

    Attributes:
        label: Region label
        anchor: Smallest point of the region in row-major order
        area: Number of cells
        perimeter: Number of boundary unit edges
        sides: Number of straight boundary runs
    """

    label: str
    anchor: Point
    area: int
    perimeter: int
    sides: int

    @property
    def perimeter_price(self) -> int:
        return self.area * self.perimeter

    @property
    def sides_price(self) -> int:
        return self.area * self.sides

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {
            "label": self.label,
            "anchor": list(self.anchor.to_tuple()),
            "area": self.area,
            "perimeter": self.perimeter,
            "sides": self.sides,
        }


def is_exposed(region: Region, point: Point, direction: Direction) -> bool:
    """Check if a point is a region cell whose edge in direction is boundary.

    Args:
        region: The region
        point: Cell to test (need not be a member)
        direction: Edge of the cell to test

    Returns:
        True if point is in region and its neighbor in direction is not
    """
    return point in region and point.neighbor(direction) not in region


def perimeter(region: Region) -> int:
    """Count the unit edges on the region's boundary.

    Args:
        region: The region to measure

    Returns:
        Total boundary length in cell edges
    """
    return sum(
        1
        for point in region
        for neighbor in point.neighbors()
        if neighbor not in region
    )


def count_sides_facing(region: Region, direction: Direction) -> int:
    """Count the straight sides whose outside faces one direction.

    Args:
        region: The region to measure
        direction: Which way the counted edges face

    Returns:
        Number of maximal runs of exposed edges facing direction
    """
    d_row, d_col = direction.perpendicular
    return sum(
        1
        for point in region
        if is_exposed(region, point, direction)
        and not is_exposed(region, point.shifted(-d_row, -d_col), direction)
    )


def count_sides(region: Region) -> int:
    """Count the distinct straight sides of the region's boundary.

    Args:
        region: The region to measure

    Returns:
        Sum of side counts over the four edge directions
    """
    return sum(count_sides_facing(region, direction) for direction in Direction)


class BoundaryMetrics:
    """Measures area, perimeter and sides of regions."""

    def measure(self, region: Region) -> RegionMetrics:
        """Measure one region.

        Args:
            region: The region to measure

        Returns:
            RegionMetrics for the region
        """
        return RegionMetrics(
            label=region.label,
            anchor=region.anchor,
            area=region.area,
            perimeter=perimeter(region),
            sides=count_sides(region),
        )
