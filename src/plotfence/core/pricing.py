"""Fence price aggregation.

price_by_perimeter sums area x perimeter over all regions and
price_by_sides sums area x sides. Python integers do not overflow, so no
width checks are needed on large grids.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from plotfence.core.metrics import BoundaryMetrics, RegionMetrics, count_sides, perimeter
from plotfence.domain import Region


@dataclass(frozen=True)
class FencingQuote:
    """Total fence prices for a grid.

    Attributes:
        price_by_perimeter: Sum of area x perimeter
        price_by_sides: Sum of area x sides
        regions: Per-region measurements, ordered by anchor
    """

    price_by_perimeter: int
    price_by_sides: int
    regions: tuple[RegionMetrics, ...] = field(default=())

    @property
    def total_area(self) -> int:
        return sum(m.area for m in self.regions)

    def as_pair(self) -> tuple[int, int]:
        """Get (price_by_perimeter, price_by_sides)."""
        return (self.price_by_perimeter, self.price_by_sides)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {
            "price_by_perimeter": self.price_by_perimeter,
            "price_by_sides": self.price_by_sides,
            "regions": [m.to_dict() for m in self.regions],
        }


def _price(regions: Iterable[Region], measure: Callable[[Region], int]) -> int:
    return sum(region.area * measure(region) for region in regions)


def price_by_perimeter(regions: Iterable[Region]) -> int:
    """Sum area x perimeter over regions."""
    return _price(regions, perimeter)


def price_by_sides(regions: Iterable[Region]) -> int:
    """Sum area x sides over regions."""
    return _price(regions, count_sides)


class PriceAggregator:
    """Combines region measurements into a FencingQuote."""

    def __init__(self, metrics: BoundaryMetrics | None = None) -> None:
        self.metrics = metrics or BoundaryMetrics()

    def aggregate(
        self,
        regions: Iterable[Region],
        on_measured: Callable[[RegionMetrics], None] | None = None,
    ) -> FencingQuote:
        """Measure every region and total both prices.

        Args:
            regions: Regions to price
            on_measured: Optional callback invoked after each region is measured

        Returns:
            FencingQuote with both totals and per-region metrics
        """
        measured: list[RegionMetrics] = []
        for region in sorted(regions, key=lambda r: r.anchor):
            result = self.metrics.measure(region)
            measured.append(result)
            if on_measured is not None:
                on_measured(result)

        return FencingQuote(
            price_by_perimeter=sum(m.perimeter_price for m in measured),
            price_by_sides=sum(m.sides_price for m in measured),
            regions=tuple(measured),
        )
