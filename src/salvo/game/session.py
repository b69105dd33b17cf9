"""Players and the turn loop that drives them."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from src.salvo.ai.strategies import Controller, Move, format_coord
from src.salvo.game.engine import DEFAULT_BOARD_SIZE, Board, resolve_attack
from src.salvo.game.models import STANDARD_FLEET, AttackResult, ShipShape

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 1000
LOG_LIMIT = 10
MIN_PLAYERS = 2


class OutcomeReason(Enum):
    VICTORY = "victory"
    ITERATION_LIMIT = "iteration_limit"


@dataclass
class Player:
    """A board, the controller deciding its moves, and whether it is out."""

    player_id: int
    board: Board
    controller: Controller
    defeated: bool = False
    target_id: int | None = None

    def has_lost(self) -> bool:
        """Rescans the board until the first time it reports a loss."""
        if not self.defeated:
            self.defeated = self.board.all_sunk()
        return self.defeated


@dataclass
class TurnReport:
    turn: int
    attacker_id: int
    defender_id: int
    move: Move
    result: AttackResult
    defender_defeated: bool

    def describe(self) -> str:
        where = format_coord(self.result.coord)
        if self.result.sunk:
            text = f"Player {self.attacker_id} sank a ship of player {self.defender_id} at {where}"
        elif self.result.hit:
            text = f"Player {self.attacker_id} hit player {self.defender_id} at {where}"
        elif self.result.already_hit:
            text = (
                f"Player {self.attacker_id} fired at {where}, "
                f"already hit on player {self.defender_id}'s board"
            )
        elif self.result.repeat:
            text = f"Player {self.attacker_id} fired again at {where} on player {self.defender_id}"
        else:
            text = f"Player {self.attacker_id} missed player {self.defender_id} at {where}"
        if self.defender_defeated:
            text += f"; player {self.defender_id} is out"
        return text


@dataclass
class Outcome:
    reason: OutcomeReason
    winners: list[int]
    turns: int

    def describe(self) -> str:
        if self.reason is OutcomeReason.ITERATION_LIMIT:
            standing = ", ".join(str(w) for w in self.winners)
            return f"Iteration limit reached after {self.turns} turns; still standing: {standing}"
        if not self.winners:
            return f"No winner after {self.turns} turns"
        return f"Player {self.winners[0]} wins after {self.turns} turns"


@dataclass
class GameSession:
    """Turn order, iteration cap and outcome for one game."""

    players: list[Player]
    max_turns: int = DEFAULT_MAX_TURNS
    turn: int = 0
    log: list[str] = field(default_factory=list)
    outcome: Outcome | None = None
    on_turn: Callable[[TurnReport], None] | None = None
    _seat: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.players) < MIN_PLAYERS:
            raise ValueError(f"need at least {MIN_PLAYERS} players")
        if len({p.player_id for p in self.players}) != len(self.players):
            raise ValueError("player ids must be unique")
        if self.max_turns < 1:
            raise ValueError("max_turns must be >= 1")

    @classmethod
    def create(
        cls,
        controllers: Sequence[Controller],
        height: int = DEFAULT_BOARD_SIZE,
        width: int = DEFAULT_BOARD_SIZE,
        fleet: Iterable[ShipShape] = STANDARD_FLEET,
        max_turns: int = DEFAULT_MAX_TURNS,
    ) -> GameSession:
        """Seat one player per controller and let each place its fleet."""
        fleet = tuple(fleet)
        players = [
            Player(player_id=seat + 1, board=Board(height, width), controller=controller)
            for seat, controller in enumerate(controllers)
        ]
        session = cls(players=players, max_turns=max_turns)
        for player in players:
            player.controller.place_fleet(player.board, fleet)
            logger.info(
                "Player %d placed %d ship cells", player.player_id, player.board.ship_cell_count(),
            )
        return session

    def append_log(self, message: str) -> None:
        self.log.append(message)
        if len(self.log) > LOG_LIMIT:
            self.log.pop(0)

    def active_players(self) -> list[Player]:
        return [p for p in self.players if not p.has_lost()]

    @property
    def defeated_count(self) -> int:
        return len(self.players) - len(self.active_players())

    @property
    def finished(self) -> bool:
        return len(self.active_players()) <= 1 or self.turn >= self.max_turns

    def _next_active(self, start: int) -> int:
        """Seat index of the first undefeated player at or after *start*."""
        n = len(self.players)
        for step in range(n):
            seat = (start + step) % n
            if not self.players[seat].has_lost():
                return seat
        raise RuntimeError("no undefeated players")

    def play_turn(self) -> TurnReport:
        """One attack by the next undefeated player on the one after it."""
        if self.finished:
            raise RuntimeError("game is already over")
        seat = self._next_active(self._seat)
        attacker = self.players[seat]
        defender = self.players[self._next_active(seat + 1)]

        if attacker.target_id != defender.player_id:
            if attacker.target_id is not None:
                logger.info(
                    "Player %d now targets player %d", attacker.player_id, defender.player_id,
                )
                attacker.board.reset_shots()
            attacker.target_id = defender.player_id

        move = attacker.controller.choose_target(attacker.board)
        result = resolve_attack(attacker.board, defender.board, move.coord)
        self.turn += 1
        self._seat = seat + 1

        report = TurnReport(
            turn=self.turn,
            attacker_id=attacker.player_id,
            defender_id=defender.player_id,
            move=move,
            result=result,
            defender_defeated=result.hit and defender.has_lost(),
        )
        self.append_log(report.describe())
        if result.hit:
            logger.info("Turn %d: %s", self.turn, report.describe())
        else:
            logger.debug("Turn %d: %s", self.turn, report.describe())
        return report

    def run(self) -> Outcome:
        """Play until one player is left or the turn cap is reached."""
        while not self.finished:
            report = self.play_turn()
            if self.on_turn is not None:
                self.on_turn(report)

        winners = [p.player_id for p in self.active_players()]
        if len(winners) <= 1:
            reason = OutcomeReason.VICTORY
        else:
            reason = OutcomeReason.ITERATION_LIMIT
            logger.warning("Iteration limit of %d turns reached", self.max_turns)
        self.outcome = Outcome(reason=reason, winners=winners, turns=self.turn)
        logger.info(self.outcome.describe())
        return self.outcome
