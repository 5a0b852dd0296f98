"""Tests for domain models to verify they work correctly."""

import pytest

from plotfence.domain import Direction, Grid, Point, Region


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(2, 3)
        assert p.row == 2
        assert p.col == 3

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(2, 3).to_tuple() == (2, 3)

    def test_point_equality_and_hash(self) -> None:
        """Points with equal coordinates are interchangeable in sets."""
        assert Point(1, 1) == Point(1, 1)
        assert len({Point(1, 1), Point(1, 1), Point(1, 2)}) == 2

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(0, 0)
        with pytest.raises(AttributeError):
            p.row = 5  # type: ignore

    def test_point_ordering_is_row_major(self) -> None:
        """Points sort by row, then column."""
        points = [Point(1, 0), Point(0, 5), Point(0, 1)]
        assert sorted(points) == [Point(0, 1), Point(0, 5), Point(1, 0)]

    def test_neighbor(self) -> None:
        """Each direction steps one cell."""
        p = Point(5, 5)
        assert p.neighbor(Direction.UP) == Point(4, 5)
        assert p.neighbor(Direction.DOWN) == Point(6, 5)
        assert p.neighbor(Direction.LEFT) == Point(5, 4)
        assert p.neighbor(Direction.RIGHT) == Point(5, 6)

    def test_neighbors(self) -> None:
        """A point has exactly four 4-adjacent neighbors."""
        assert set(Point(0, 0).neighbors()) == {
            Point(-1, 0),
            Point(1, 0),
            Point(0, -1),
            Point(0, 1),
        }


class TestDirection:
    """Tests for Direction enum."""

    def test_horizontal_edges_run_along_columns(self) -> None:
        """Top and bottom edges line up along a row."""
        assert Direction.UP.perpendicular == (0, 1)
        assert Direction.DOWN.perpendicular == (0, 1)

    def test_vertical_edges_run_along_rows(self) -> None:
        """Left and right edges line up along a column."""
        assert Direction.LEFT.perpendicular == (1, 0)
        assert Direction.RIGHT.perpendicular == (1, 0)


class TestGrid:
    """Tests for Grid class."""

    def test_from_rows(self) -> None:
        """Test grid creation from row strings."""
        grid = Grid.from_rows(["AB", "CD"])
        assert grid.rows == 2
        assert grid.cols == 2
        assert grid.label_at(Point(1, 0)) == "C"
        assert len(grid) == 4

    def test_label_outside_grid(self) -> None:
        """Points outside the grid have no label."""
        grid = Grid.from_rows(["AB"])
        assert grid.label_at(Point(1, 0)) is None
        assert Point(-1, 0) not in grid

    def test_labels(self) -> None:
        """Distinct labels are reported once each."""
        grid = Grid.from_rows(["AAB", "BBC"])
        assert grid.labels() == frozenset({"A", "B", "C"})

    def test_points_row_major(self) -> None:
        """Points iterate row by row."""
        grid = Grid.from_rows(["AB", "CD"])
        assert list(grid.points()) == [Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1)]

    def test_cells_read_only(self) -> None:
        """Grid cells cannot be modified."""
        grid = Grid.from_rows(["A"])
        with pytest.raises(TypeError):
            grid.cells[Point(0, 0)] = "B"  # type: ignore[index]

    def test_equality(self) -> None:
        """Grids with the same cells are equal and hash alike."""
        a = Grid.from_rows(["AB", "CD"])
        b = Grid.from_rows(["AB", "CD"])
        assert a == b
        assert hash(a) == hash(b)
        assert a != Grid.from_rows(["AB", "CE"])


class TestRegion:
    """Tests for Region class."""

    def test_region_creation(self) -> None:
        """Test region creation from tuples."""
        region = Region.of("A", [(0, 0), (0, 1)])
        assert region.label == "A"
        assert region.area == 2
        assert Point(0, 1) in region

    def test_empty_region_rejected(self) -> None:
        """Regions must hold at least one point."""
        with pytest.raises(ValueError):
            Region(label="A", points=frozenset())

    def test_anchor(self) -> None:
        """Anchor is the first point in row-major order."""
        region = Region.of("A", [(2, 0), (1, 3), (1, 4)])
        assert region.anchor == Point(1, 3)

    def test_set_equality(self) -> None:
        """Regions compare by label and points, not construction order."""
        a = Region.of("A", [(0, 0), (0, 1)])
        b = Region.of("A", [(0, 1), (0, 0)])
        assert a == b
        assert {a} == {b}
        assert a != Region.of("B", [(0, 0), (0, 1)])
