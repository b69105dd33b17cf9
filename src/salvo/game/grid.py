"""Bounds-checked rectangular grid of cells."""

from __future__ import annotations

from collections.abc import Iterator

from src.salvo.core.errors import OutOfBoundsError
from src.salvo.game.models import Cell, Coord

MIN_DIMENSION = 2


class Grid:
    """Fixed-size ``height x width`` grid indexed only by ``(row, col)``."""

    def __init__(self, height: int, width: int, fill: Cell = Cell.EMPTY) -> None:
        if height < MIN_DIMENSION or width < MIN_DIMENSION:
            raise ValueError(
                f"grid must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, "
                f"got {height}x{width}",
            )
        self.height = height
        self.width = width
        self._cells: list[list[Cell]] = [[fill] * width for _ in range(height)]

    def in_bounds(self, coord: tuple[int, int]) -> bool:
        row, col = coord
        return 0 <= row < self.height and 0 <= col < self.width

    def _check(self, coord: tuple[int, int]) -> tuple[int, int]:
        row, col = coord
        if not self.in_bounds(coord):
            raise OutOfBoundsError(row, col, self.height, self.width)
        return row, col

    def __getitem__(self, coord: tuple[int, int]) -> Cell:
        row, col = self._check(coord)
        return self._cells[row][col]

    def __setitem__(self, coord: tuple[int, int], value: Cell) -> None:
        row, col = self._check(coord)
        self._cells[row][col] = value

    def __iter__(self) -> Iterator[Coord]:
        for row in range(self.height):
            for col in range(self.width):
                yield Coord(row, col)

    def fill(self, value: Cell) -> None:
        for row in self._cells:
            row[:] = [value] * self.width

    def count(self, value: Cell) -> int:
        return sum(row.count(value) for row in self._cells)

    def snapshot(self) -> list[list[Cell]]:
        """Copy of the cells, safe to hand to a renderer."""
        return [list(row) for row in self._cells]
