"""Salvo console entry point: seat players, place fleets, play to the end."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence

from src.salvo.ai.strategies import Controller, create_controller
from src.salvo.core.config import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEBUG,
    HUMANS,
    LOG_LEVEL,
    MAX_TURNS,
    PLAYERS,
    SEED,
)
from src.salvo.core.errors import PlacementError
from src.salvo.game.grid import MIN_DIMENSION
from src.salvo.game.session import MIN_PLAYERS, GameSession, TurnReport
from src.salvo.ui.prompts import Prompter
from src.salvo.ui.render import render_grid

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Console Battleship")
    parser.add_argument("--players", type=int, default=PLAYERS, help="Number of players.")
    parser.add_argument(
        "--humans", type=int, default=HUMANS, help="How many players are asked at the console.",
    )
    parser.add_argument("--height", type=int, default=BOARD_HEIGHT, help="Board rows.")
    parser.add_argument("--width", type=int, default=BOARD_WIDTH, help="Board columns.")
    parser.add_argument("--seed", type=int, default=SEED, help="Seed for automated players.")
    parser.add_argument(
        "--max-turns", type=int, default=MAX_TURNS, help="Turn cap before the game is called.",
    )
    parser.add_argument(
        "--reveal", action="store_true", help="Print every board with ships shown at the end.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase verbosity.",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only print the result.",
    )
    return parser


def _validate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.players < MIN_PLAYERS:
        parser.error(f"--players must be at least {MIN_PLAYERS}")
    if not 0 <= args.humans <= args.players:
        parser.error("--humans must be between 0 and --players")
    if args.height < MIN_DIMENSION or args.width < MIN_DIMENSION:
        parser.error(f"--height and --width must be at least {MIN_DIMENSION}")
    if args.max_turns < 1:
        parser.error("--max-turns must be at least 1")


def _log_level(args: argparse.Namespace) -> int:
    if args.quiet:
        return logging.ERROR
    if DEBUG or args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    return logging.getLevelNamesMapping().get(LOG_LEVEL, logging.WARNING)


def make_controllers(
    players: int,
    humans: int,
    rng: random.Random,
    prompter: Prompter | None = None,
) -> list[Controller]:
    """Humans take the first seats, automated players the rest."""
    return [
        create_controller("console", prompter=prompter) if seat < humans
        else create_controller("random", rng=rng)
        for seat in range(players)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate(parser, args)

    logging.basicConfig(
        level=_log_level(args),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    logger.info("Seed: %s", "system entropy" if args.seed is None else args.seed)

    def report(turn: TurnReport) -> None:
        if args.humans and not args.quiet:
            print(turn.describe())

    try:
        session = GameSession.create(
            make_controllers(args.players, args.humans, rng),
            height=args.height,
            width=args.width,
            max_turns=args.max_turns,
        )
        session.on_turn = report
        outcome = session.run()
    except PlacementError as exc:
        logger.error("Fleet placement failed: %s", exc)
        print(f"Cannot set up a {args.height}x{args.width} board: {exc}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.", file=sys.stderr)
        return 1

    if args.reveal and not args.quiet:
        for player in session.players:
            print(render_grid(player.board.ships, reveal_ships=True, title=str(player.player_id)))
    print(outcome.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())
