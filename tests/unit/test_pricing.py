"""Unit tests for price aggregation."""

from plotfence.core.metrics import RegionMetrics
from plotfence.core.pricing import (
    FencingQuote,
    PriceAggregator,
    price_by_perimeter,
    price_by_sides,
)
from plotfence.domain import Point, Region


def _regions():
    return [
        Region.of("A", [(0, 0), (0, 1), (0, 2), (0, 3)]),
        Region.of("B", [(1, 0), (1, 1), (2, 0), (2, 1)]),
        Region.of("C", [(1, 2), (2, 2), (2, 3), (3, 3)]),
        Region.of("D", [(1, 3)]),
        Region.of("E", [(3, 0), (3, 1), (3, 2)]),
    ]


class TestPriceFunctions:
    """Tests for the standalone price functions."""

    def test_price_by_perimeter(self):
        """Sum of area x perimeter."""
        assert price_by_perimeter(_regions()) == 40 + 32 + 40 + 4 + 24

    def test_price_by_sides(self):
        """Sum of area x sides."""
        assert price_by_sides(_regions()) == 16 + 16 + 32 + 4 + 12

    def test_no_regions(self):
        """No regions cost nothing."""
        assert price_by_perimeter([]) == 0
        assert price_by_sides([]) == 0


class TestPriceAggregator:
    """Tests for PriceAggregator."""

    def test_aggregate_totals(self):
        """Aggregate returns both totals."""
        quote = PriceAggregator().aggregate(_regions())
        assert quote.as_pair() == (140, 80)
        assert quote.total_area == 16

    def test_regions_ordered_by_anchor(self):
        """Per-region metrics come back in row-major anchor order."""
        quote = PriceAggregator().aggregate(reversed(_regions()))
        assert [m.label for m in quote.regions] == ["A", "B", "C", "D", "E"]

    def test_on_measured_callback(self):
        """The callback sees every region once."""
        seen = []
        PriceAggregator().aggregate(_regions(), on_measured=seen.append)
        assert sorted(m.label for m in seen) == ["A", "B", "C", "D", "E"]

    def test_large_values(self):
        """Prices on big regions are exact."""
        region = Region.of("Z", [(r, c) for r in range(200) for c in range(200)])
        quote = PriceAggregator().aggregate([region])
        assert quote.price_by_perimeter == 40_000 * 800
        assert quote.price_by_sides == 40_000 * 4


class TestFencingQuote:
    """Tests for FencingQuote serialization."""

    def test_to_dict(self):
        """Quote serializes totals and regions."""
        metrics = RegionMetrics(label="A", anchor=Point(0, 0), area=1, perimeter=4, sides=4)
        quote = FencingQuote(price_by_perimeter=4, price_by_sides=4, regions=(metrics,))
        assert quote.to_dict() == {
            "price_by_perimeter": 4,
            "price_by_sides": 4,
            "regions": [
                {"label": "A", "anchor": [0, 0], "area": 1, "perimeter": 4, "sides": 4}
            ],
        }
