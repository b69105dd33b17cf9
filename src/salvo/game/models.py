"""Core value types shared by the grid, engine and session."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from src.salvo.core.errors import PlacementError


class Cell(Enum):
    """State of a single grid square."""

    EMPTY = "empty"
    SHIP = "ship"
    HIT = "hit"
    MISS = "miss"
    SUNK = "sunk"

    @property
    def is_ship(self) -> bool:
        """True for any cell that is, or was, part of a ship."""
        return self in (Cell.SHIP, Cell.HIT, Cell.SUNK)


class Coord(NamedTuple):
    """Zero-based (row, col) position on a grid."""

    row: int
    col: int

    def neighbours(self) -> Iterator[Coord]:
        """Yield the four orthogonal neighbours (may be off-grid)."""
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            yield Coord(self.row + dr, self.col + dc)


Mask = tuple[tuple[bool, ...], ...]


def make_mask(rows: list[list[int]] | tuple[tuple[int, ...], ...]) -> Mask:
    """Normalise a nested 0/1 list into an immutable boolean mask."""
    return tuple(tuple(bool(v) for v in row) for row in rows)


@dataclass(frozen=True)
class ShipShape:
    """A ship template and how many of it a fleet carries."""

    name: str
    mask: Mask
    count: int = 1

    def __post_init__(self) -> None:
        if not self.mask or not self.mask[0]:
            raise PlacementError(f"{self.name}: mask must not be empty")
        if any(len(row) != len(self.mask[0]) for row in self.mask):
            raise PlacementError(f"{self.name}: mask must be rectangular")
        if self.cell_count == 0:
            raise PlacementError(f"{self.name}: mask has no ship cells")
        if self.count < 0:
            raise PlacementError(f"{self.name}: count must be >= 0")

    @property
    def height(self) -> int:
        return len(self.mask)

    @property
    def width(self) -> int:
        return len(self.mask[0])

    @property
    def cell_count(self) -> int:
        return sum(v for row in self.mask for v in row)

    def footprint(self) -> list[tuple[int, int]]:
        """Mask-local offsets that hold a ship cell."""
        return [
            (i, j)
            for i, row in enumerate(self.mask)
            for j, v in enumerate(row)
            if v
        ]


CARRIER = ShipShape("Carrier", make_mask([[1, 1], [1, 1], [0, 1]]), count=1)
BATTLESHIP = ShipShape("Battleship", make_mask([[1], [1], [1], [1]]), count=1)
CRUISER = ShipShape("Cruiser", make_mask([[1], [1], [1]]), count=2)
DESTROYER = ShipShape("Destroyer", make_mask([[1], [1]]), count=1)

STANDARD_FLEET: tuple[ShipShape, ...] = (CARRIER, BATTLESHIP, CRUISER, DESTROYER)


def fleet_cell_count(fleet: tuple[ShipShape, ...] | list[ShipShape]) -> int:
    """Number of ship cells a fully placed fleet occupies."""
    return sum(shape.cell_count * shape.count for shape in fleet)


@dataclass(frozen=True)
class Placement:
    """One orientation of a shape around an anchor corner.

    ``rows_major`` maps mask row ``i`` along the board rows; when False the
    mask axes are swapped so mask rows run along the board columns.
    """

    row_step: int
    col_step: int
    rows_major: bool = True

    def offset(self, i: int, j: int) -> tuple[int, int]:
        if self.rows_major:
            return i * self.row_step, j * self.col_step
        return j * self.row_step, i * self.col_step

    def cell(self, origin: Coord, i: int, j: int) -> Coord:
        dr, dc = self.offset(i, j)
        return Coord(origin.row + dr, origin.col + dc)

    def describe(self) -> str:
        axis = "rows" if self.rows_major else "columns"
        return f"{axis} {self.row_step:+d}/{self.col_step:+d}"


ORIENTATIONS: tuple[Placement, ...] = tuple(
    Placement(row_step, col_step, rows_major)
    for rows_major in (True, False)
    for row_step in (1, -1)
    for col_step in (1, -1)
)


@dataclass(frozen=True)
class AttackResult:
    """Outcome of a single shot."""

    coord: Coord
    hit: bool
    sunk: bool = False
    repeat: bool = False
    already_hit: bool = False
    cells: frozenset[Coord] = field(default_factory=frozenset)
