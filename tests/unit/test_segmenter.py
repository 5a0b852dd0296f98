"""Unit tests for region segmentation.

Tests cover:
- Region contents for small known grids
- Same label split into several regions
- Partition law and idempotence for both traversal orders
- Large single-region grids (no recursion limit)
"""

import pytest

from plotfence.config import SegmentationConfig, TraversalOrder
from plotfence.core.parser import parse_grid
from plotfence.core.segmenter import RegionSegmenter, segment
from plotfence.domain import Grid, Region

SMALL = "AAAA\nBBCD\nBBCC\nEEEC"
ENCLOSED = "OOOOO\nOXOXO\nOOOOO\nOXOXO\nOOOOO"
LARGE = "\n".join(
    [
        "RRRRIICCFF",
        "RRRRIICCCF",
        "VVRRRCCFFF",
        "VVRCCCJFFF",
        "VVVVCJJCFE",
        "VVIVCCJJEE",
        "VVIIICJJEE",
        "MIIIIIJJEE",
        "MIIISIJEEE",
        "MMMISSJEEE",
    ]
)

ORDERS = [TraversalOrder.BREADTH_FIRST, TraversalOrder.DEPTH_FIRST]


class TestKnownGrids:
    """Tests for segmenting grids with known regions."""

    def test_small_grid_regions(self):
        """Each label of the small garden forms one region."""
        regions = segment(parse_grid(SMALL))
        assert regions == {
            Region.of("A", [(0, 0), (0, 1), (0, 2), (0, 3)]),
            Region.of("B", [(1, 0), (1, 1), (2, 0), (2, 1)]),
            Region.of("C", [(1, 2), (2, 2), (2, 3), (3, 3)]),
            Region.of("D", [(1, 3)]),
            Region.of("E", [(3, 0), (3, 1), (3, 2)]),
        }

    def test_enclosed_regions(self):
        """Enclosed cells are separate regions from their surroundings."""
        regions = segment(parse_grid(ENCLOSED))
        by_label = sorted(regions, key=lambda r: (r.label, r.anchor))
        assert len(regions) == 5
        assert by_label[0].label == "O"
        assert by_label[0].area == 21
        assert [r.area for r in by_label[1:]] == [1, 1, 1, 1]

    def test_same_label_disjoint_regions(self):
        """Cells with the same label that do not touch are different regions."""
        regions = segment(parse_grid(LARGE))
        labels = sorted(r.label for r in regions)
        assert len(regions) == 11
        assert labels.count("C") == 2
        assert labels.count("I") == 2

    def test_diagonal_cells_not_connected(self):
        """Only up/down/left/right neighbors connect."""
        regions = segment(Grid.from_rows(["AB", "BA"]))
        assert len(regions) == 4
        assert all(r.area == 1 for r in regions)

    def test_single_label_grid(self):
        """A uniform grid is a single region."""
        regions = segment(Grid.from_rows(["ZZZ", "ZZZ"]))
        assert regions == {Region.of("Z", [(r, c) for r in range(2) for c in range(3)])}


class TestPartition:
    """Tests for the partition law and idempotence."""

    @pytest.mark.parametrize("order", ORDERS)
    @pytest.mark.parametrize("text", [SMALL, ENCLOSED, LARGE, "A", "AB\nBA"])
    def test_regions_cover_grid_exactly_once(self, text, order):
        """Regions are disjoint and together hold every grid point."""
        grid = parse_grid(text)
        regions = RegionSegmenter(SegmentationConfig(traversal=order)).segment(grid)

        seen = set()
        for region in regions:
            assert seen.isdisjoint(region.points)
            seen |= region.points
        assert seen == set(grid.points())

    @pytest.mark.parametrize("order", ORDERS)
    def test_regions_are_single_labeled(self, order):
        """Every point of a region carries the region's label."""
        grid = parse_grid(LARGE)
        for region in segment(grid, SegmentationConfig(traversal=order)):
            assert {grid.label_at(p) for p in region} == {region.label}

    def test_idempotent(self):
        """Segmenting the same grid twice gives set-equal regions."""
        grid = parse_grid(LARGE)
        segmenter = RegionSegmenter()
        assert segmenter.segment(grid) == segmenter.segment(grid)

    def test_traversal_orders_agree(self):
        """Breadth-first and depth-first fill find the same regions."""
        grid = parse_grid(LARGE)
        bfs = segment(grid, SegmentationConfig(traversal=TraversalOrder.BREADTH_FIRST))
        dfs = segment(grid, SegmentationConfig(traversal=TraversalOrder.DEPTH_FIRST))
        assert bfs == dfs

    def test_grid_not_modified(self):
        """Segmentation works on a private copy of the cells."""
        grid = parse_grid(SMALL)
        segment(grid)
        assert len(grid.cells) == 16


class TestLargeGrids:
    """Tests for grids too big for recursive flood fill."""

    @pytest.mark.parametrize("order", ORDERS)
    def test_large_uniform_grid(self, order):
        """A 300x300 uniform grid is one region."""
        grid = Grid.from_rows(["G" * 300] * 300)
        regions = segment(grid, SegmentationConfig(traversal=order))
        assert len(regions) == 1
        assert next(iter(regions)).area == 90_000

    def test_long_snake(self):
        """A winding one-cell-wide path is one region."""
        rows = []
        for r in range(41):
            if r % 2 == 0:
                rows.append("S" * 40)
            elif r % 4 == 1:
                rows.append("." * 39 + "S")
            else:
                rows.append("S" + "." * 39)
        regions = segment(Grid.from_rows(rows))
        snake = [r for r in regions if r.label == "S"]
        assert len(snake) == 1
        assert snake[0].area == 21 * 40 + 20
