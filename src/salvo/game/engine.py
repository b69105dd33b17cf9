"""
Board state and rules: placement, attacks, sinking and loss.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Iterable

from src.salvo.core.errors import OutOfBoundsError, PlacementError
from src.salvo.game.grid import Grid
from src.salvo.game.models import (
    ORIENTATIONS,
    STANDARD_FLEET,
    AttackResult,
    Cell,
    Coord,
    Mask,
    Placement,
    ShipShape,
)

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 10
MAX_LAYOUT_RESTARTS = 100


class Board:
    """A player's own ship grid plus the grid of shots fired at an opponent."""

    def __init__(
        self,
        height: int = DEFAULT_BOARD_SIZE,
        width: int = DEFAULT_BOARD_SIZE,
    ) -> None:
        self.ships = Grid(height, width)
        self.shots = Grid(height, width)

    @property
    def height(self) -> int:
        return self.ships.height

    @property
    def width(self) -> int:
        return self.ships.width

    def reset_shots(self) -> None:
        self.shots.fill(Cell.EMPTY)

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def placement_candidates(
        self,
        origin: tuple[int, int],
        height: int,
        width: int,
        mask: Mask | None = None,
    ) -> list[Placement]:
        return placement_candidates(self, origin, height, width, mask)

    def candidates_for(self, origin: tuple[int, int], shape: ShipShape) -> list[Placement]:
        return placement_candidates(self, origin, shape.height, shape.width, shape.mask)

    def place(
        self,
        origin: tuple[int, int],
        placement: Placement,
        shape: ShipShape,
    ) -> frozenset[Coord]:
        """Write *shape* onto the ship grid.

        *placement* must come from :meth:`placement_candidates` for the same
        origin and current board state; nothing is re-validated here.
        """
        origin = Coord(*origin)
        occupied: set[Coord] = set()
        for i, row in enumerate(shape.mask):
            for j, filled in enumerate(row):
                cell = placement.cell(origin, i, j)
                self.ships[cell] = Cell.SHIP if filled else Cell.EMPTY
                if filled:
                    occupied.add(cell)
        logger.debug(
            "Placed %s at %s (%s)", shape.name, tuple(origin), placement.describe(),
        )
        return frozenset(occupied)

    def fitting_origins(self, shape: ShipShape) -> list[Coord]:
        """Every cell from which *shape* has at least one legal placement."""
        return [cell for cell in self.ships if self.candidates_for(cell, shape)]

    def place_fleet_randomly(
        self,
        rng: random.Random,
        fleet: Iterable[ShipShape] = STANDARD_FLEET,
        max_restarts: int = MAX_LAYOUT_RESTARTS,
    ) -> list[frozenset[Coord]]:
        """Place every ship of *fleet* at random legal positions.

        Each ship first tries one random origin, then falls back to a uniform
        pick among all origins that still fit. When no origin fits, the ships
        placed so far are lifted and the layout starts over, up to
        *max_restarts* times before :class:`PlacementError` is raised.
        """
        if max_restarts < 1:
            raise ValueError("max_restarts must be at least 1")
        fleet = list(fleet)
        for layout in range(1, max_restarts + 1):
            placed, stuck = self._random_layout(rng, fleet)
            if stuck is None:
                return placed
            logger.debug("No room left for %s on layout %d, starting over", stuck.name, layout)
        raise PlacementError(f"could not fit the {stuck.name} after {max_restarts} layouts")

    def _random_layout(
        self,
        rng: random.Random,
        fleet: list[ShipShape],
    ) -> tuple[list[frozenset[Coord]], ShipShape | None]:
        placed: list[frozenset[Coord]] = []
        for shape in fleet:
            for _ in range(shape.count):
                origin = Coord(rng.randrange(self.height), rng.randrange(self.width))
                candidates = self.candidates_for(origin, shape)
                if not candidates:
                    origins = self.fitting_origins(shape)
                    if not origins:
                        for cells in placed:
                            for cell in cells:
                                self.ships[cell] = Cell.EMPTY
                        return [], shape
                    origin = rng.choice(origins)
                    candidates = self.candidates_for(origin, shape)
                placed.append(self.place(origin, rng.choice(candidates), shape))
        return placed, None

    # ------------------------------------------------------------------
    # Attacks
    # ------------------------------------------------------------------

    def receive_fire(self, coord: tuple[int, int]) -> bool:
        """Return True if *coord* held an intact ship cell, marking it hit."""
        if self.ships[coord] is not Cell.SHIP:
            return False
        self.ships[coord] = Cell.HIT
        return True

    def ship_at(self, coord: tuple[int, int]) -> frozenset[Coord]:
        """Cells of the orthogonally connected ship containing *coord*."""
        start = Coord(*coord)
        if not self.ships[start].is_ship:
            return frozenset()
        seen = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for nxt in current.neighbours():
                if nxt in seen or not self.ships.in_bounds(nxt):
                    continue
                if self.ships[nxt].is_ship:
                    seen.add(nxt)
                    queue.append(nxt)
        return frozenset(seen)

    def is_sunk(self, coord: tuple[int, int]) -> bool:
        """True when no cell of the ship at *coord* is still intact."""
        cells = self.ship_at(coord)
        return bool(cells) and all(self.ships[c] is not Cell.SHIP for c in cells)

    def all_sunk(self) -> bool:
        """Full scan: True when no intact ship cell remains."""
        return all(self.ships[c] is not Cell.SHIP for c in self.ships)

    def ship_cell_count(self) -> int:
        return sum(1 for c in self.ships if self.ships[c].is_ship)


def placement_candidates(
    board: Board,
    origin: tuple[int, int],
    height: int,
    width: int,
    mask: Mask | None = None,
) -> list[Placement]:
    """All orientations of a ``height x width`` box anchored at *origin* that fit.

    Checks the eight row/column sign and axis-swap variants in a fixed order.
    A variant fits when its whole box is on the board and empty and none of its
    ship cells touches another ship edge-on. Without a mask every cell of the
    box counts as a ship cell. Duplicate variants (e.g. for one-wide shapes)
    are all kept.
    """
    grid = board.ships
    origin = Coord(*origin)
    if not grid.in_bounds(origin):
        raise OutOfBoundsError(origin.row, origin.col, grid.height, grid.width)

    fits: list[Placement] = []
    for placement in ORIENTATIONS:
        box = [
            placement.cell(origin, i, j)
            for i in range(height)
            for j in range(width)
        ]
        if not all(grid.in_bounds(c) and grid[c] is Cell.EMPTY for c in box):
            continue
        if _touches_ship(board, origin, placement, mask, height, width):
            continue
        fits.append(placement)
    return fits


def _touches_ship(
    board: Board,
    origin: Coord,
    placement: Placement,
    mask: Mask | None,
    height: int,
    width: int,
) -> bool:
    if mask is None:
        mask = tuple((True,) * width for _ in range(height))
    footprint = {
        placement.cell(origin, i, j)
        for i, row in enumerate(mask)
        for j, filled in enumerate(row)
        if filled
    }
    grid = board.ships
    for cell in footprint:
        for nxt in cell.neighbours():
            if nxt in footprint or not grid.in_bounds(nxt):
                continue
            if grid[nxt].is_ship:
                return True
    return False


def resolve_attack(
    attacker: Board,
    defender: Board,
    coord: tuple[int, int],
) -> AttackResult:
    """Fire from *attacker* at *defender* and record the shot on both grids."""
    coord = Coord(*coord)
    repeat = attacker.shots[coord] is not Cell.EMPTY
    if not defender.receive_fire(coord):
        already_hit = defender.ships[coord].is_ship
        if not repeat:
            # Another player may already have hit this cell.
            attacker.shots[coord] = defender.ships[coord] if already_hit else Cell.MISS
        return AttackResult(coord=coord, hit=False, repeat=repeat, already_hit=already_hit)

    if not defender.is_sunk(coord):
        attacker.shots[coord] = Cell.HIT
        return AttackResult(coord=coord, hit=True, repeat=repeat)

    cells = defender.ship_at(coord)
    for cell in cells:
        defender.ships[cell] = Cell.SUNK
        attacker.shots[cell] = Cell.SUNK
    logger.debug("Ship of %d cells sunk at %s", len(cells), tuple(coord))
    return AttackResult(coord=coord, hit=True, sunk=True, repeat=repeat, cells=cells)
