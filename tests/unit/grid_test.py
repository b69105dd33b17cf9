"""Tests for the bounds-checked grid."""

from __future__ import annotations

import pytest

from src.salvo.core.errors import OutOfBoundsError
from src.salvo.game.grid import Grid
from src.salvo.game.models import Cell, Coord

HEIGHT = 3
WIDTH = 4


class TestGrid:
    def test_starts_empty(self: TestGrid) -> None:
        """A new grid is all water."""
        grid = Grid(HEIGHT, WIDTH)
        assert grid.count(Cell.EMPTY) == HEIGHT * WIDTH
        assert len(list(grid)) == HEIGHT * WIDTH

    @pytest.mark.parametrize(("height", "width"), [(1, 5), (5, 1), (0, 0)])
    def test_too_small_rejected(self: TestGrid, height: int, width: int) -> None:
        """Either side below two is refused."""
        with pytest.raises(ValueError, match="at least 2x2"):
            Grid(height, width)

    def test_set_and_get(self: TestGrid) -> None:
        """Coord and plain tuple keys address the same cell."""
        grid = Grid(HEIGHT, WIDTH)
        grid[Coord(1, 2)] = Cell.SHIP
        assert grid[(1, 2)] is Cell.SHIP
        assert grid.count(Cell.SHIP) == 1

    @pytest.mark.parametrize("coord", [(-1, 0), (0, -1), (HEIGHT, 0), (0, WIDTH)])
    def test_out_of_bounds_read_fails_loudly(self: TestGrid, coord: tuple[int, int]) -> None:
        """Negative indices must not wrap around like list indexing."""
        grid = Grid(HEIGHT, WIDTH)
        with pytest.raises(OutOfBoundsError):
            grid[coord]

    def test_out_of_bounds_write_is_index_error(self: TestGrid) -> None:
        """Bounds errors are also IndexErrors."""
        grid = Grid(HEIGHT, WIDTH)
        with pytest.raises(IndexError):
            grid[(HEIGHT, WIDTH)] = Cell.SHIP

    def test_snapshot_is_a_copy(self: TestGrid) -> None:
        """Editing a snapshot leaves the grid alone."""
        grid = Grid(HEIGHT, WIDTH)
        snap = grid.snapshot()
        snap[0][0] = Cell.SHIP
        assert grid[(0, 0)] is Cell.EMPTY

    def test_fill(self: TestGrid) -> None:
        """Fill overwrites every cell."""
        grid = Grid(HEIGHT, WIDTH)
        grid.fill(Cell.MISS)
        assert grid.count(Cell.MISS) == HEIGHT * WIDTH
