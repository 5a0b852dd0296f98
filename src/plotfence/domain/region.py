"""Region (garden plot) representation."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from plotfence.domain.point import Point


@dataclass(frozen=True)
class Region:
    """A maximal 4-connected set of points sharing one label.

    Regions compare and hash by label and point set, so collections of
    regions can be compared with set equality regardless of discovery order.

    Attributes:
        label: Plant label shared by every point
        points: The member points (never empty)
    """

    label: str
    points: frozenset[Point]

    def __post_init__(self) -> None:
        if not self.points:
            raise ValueError("Region must contain at least one point")

    @classmethod
    def of(cls, label: str, points: Iterable[Point | tuple[int, int]]) -> "Region":
        """Build a region from points or (row, col) tuples."""
        return cls(
            label=label,
            points=frozenset(p if isinstance(p, Point) else Point(*p) for p in points),
        )

    @property
    def area(self) -> int:
        """Number of cells in the region."""
        return len(self.points)

    @property
    def anchor(self) -> Point:
        """Smallest member point in row-major order."""
        return min(self.points)

    def __contains__(self, point: object) -> bool:
        return point in self.points

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)
