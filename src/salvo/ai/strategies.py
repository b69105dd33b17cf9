"""Decision makers for players: uniform-random automation and console input."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.salvo.core.errors import PlacementError
from src.salvo.game.labels import column_label
from src.salvo.game.models import STANDARD_FLEET, Cell, Coord, Placement, ShipShape
from src.salvo.ui.prompts import Prompter
from src.salvo.ui.render import render_grid, render_placement_options

if TYPE_CHECKING:
    from src.salvo.game.engine import Board

logger = logging.getLogger(__name__)


@dataclass
class Move:
    """A chosen target cell and why it was picked."""

    coord: Coord
    reasoning: str


def format_coord(coord: tuple[int, int]) -> str:
    """Human form of a coordinate, e.g. ``C7``."""
    return f"{column_label(coord[1])}{coord[0] + 1}"


class Controller(ABC):
    """Makes the placement and targeting decisions for one player."""

    interactive = False

    @abstractmethod
    def choose_origin(self, board: Board, shape: ShipShape) -> Coord:
        """Pick the anchor cell for the next ship."""

    @abstractmethod
    def choose_placement(
        self,
        board: Board,
        origin: Coord,
        shape: ShipShape,
        candidates: list[Placement],
    ) -> Placement:
        """Pick one of the non-empty *candidates*."""

    @abstractmethod
    def choose_target(self, board: Board) -> Move:
        """Pick the next cell to fire at, using *board*'s shot grid."""

    def on_no_fit(self, origin: Coord, shape: ShipShape) -> None:
        """Called when *origin* admits no placement for *shape*."""

    def on_no_room(self, shape: ShipShape) -> None:
        """Called when no origin on the board admits *shape*."""

    def place_fleet(self, board: Board, fleet: Iterable[ShipShape] = STANDARD_FLEET) -> None:
        """Place every ship, asking for a new origin whenever one has no fit.

        Raises :class:`PlacementError` when a ship fits nowhere on the board.
        """
        for shape in fleet:
            for _ in range(shape.count):
                if not board.fitting_origins(shape):
                    self.on_no_room(shape)
                    raise PlacementError(f"no room left for the {shape.name}")
                while True:
                    origin = self.choose_origin(board, shape)
                    candidates = board.candidates_for(origin, shape)
                    if candidates:
                        break
                    self.on_no_fit(origin, shape)
                placement = self.choose_placement(board, origin, shape, candidates)
                board.place(origin, placement, shape)


class RandomController(Controller):
    """Uniform-random legal moves from a seeded source."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def _random_cell(self, board: Board) -> Coord:
        return Coord(self.rng.randrange(board.height), self.rng.randrange(board.width))

    def choose_origin(self, board: Board, shape: ShipShape) -> Coord:
        return self._random_cell(board)

    def choose_placement(
        self,
        board: Board,
        origin: Coord,
        shape: ShipShape,
        candidates: list[Placement],
    ) -> Placement:
        return self.rng.choice(candidates)

    def place_fleet(self, board: Board, fleet: Iterable[ShipShape] = STANDARD_FLEET) -> None:
        board.place_fleet_randomly(self.rng, fleet)

    def choose_target(self, board: Board) -> Move:
        if board.shots.count(Cell.EMPTY) == 0:
            logger.warning("Every cell already fired at; repeating a shot")
            return Move(self._random_cell(board), "No untried cells left")
        while True:
            coord = self._random_cell(board)
            if board.shots[coord] is Cell.EMPTY:
                return Move(coord, "Random untried cell")


class ConsoleController(Controller):
    """Asks a human at the terminal for every decision."""

    interactive = True

    def __init__(self, prompter: Prompter | None = None) -> None:
        self.prompter = prompter or Prompter()

    def _ask_cell(self, board: Board, what: str) -> Coord:
        row = self.prompter.ask_row(board.height, f"{what} row")
        col = self.prompter.ask_column(board.width, f"{what} column")
        return Coord(row, col)

    def choose_origin(self, board: Board, shape: ShipShape) -> Coord:
        self.prompter.say(render_grid(board.ships, reveal_ships=True))
        self.prompter.say(f"Placing {shape.name} ({shape.cell_count} cells).")
        return self._ask_cell(board, "Origin")

    def on_no_fit(self, origin: Coord, shape: ShipShape) -> None:
        self.prompter.say(
            f"No room for the {shape.name} at {format_coord(origin)}; pick another cell.",
        )

    def on_no_room(self, shape: ShipShape) -> None:
        self.prompter.say(f"The {shape.name} cannot fit anywhere on this board.")

    def choose_placement(
        self,
        board: Board,
        origin: Coord,
        shape: ShipShape,
        candidates: list[Placement],
    ) -> Placement:
        corners = [p.cell(origin, shape.height - 1, shape.width - 1) for p in candidates]
        self.prompter.say(render_placement_options(board.ships, origin, corners))
        for n, (placement, corner) in enumerate(zip(candidates, corners), start=1):
            self.prompter.say(f"  {n}: {placement.describe()} -> {format_coord(corner)}")
        return candidates[self.prompter.ask_choice(len(candidates), "Placement")]

    def choose_target(self, board: Board) -> Move:
        self.prompter.say(render_grid(board.ships, reveal_ships=True, title="you"))
        self.prompter.say(render_grid(board.shots, title="foe"))
        while True:
            coord = self._ask_cell(board, "Target")
            if board.shots[coord] is Cell.EMPTY:
                return Move(coord, "Player choice")
            self.prompter.say(f"{format_coord(coord)} was already fired at.")


def create_controller(
    kind: str,
    rng: random.Random | None = None,
    prompter: Prompter | None = None,
) -> Controller:
    """Create a controller by name: ``random`` or ``console``."""
    if kind == "console":
        return ConsoleController(prompter)
    if kind == "random":
        return RandomController(rng or random.Random())
    raise ValueError(f"unknown controller kind: {kind!r}")
