"""Box-drawing text rendering of grids."""

from __future__ import annotations

from collections.abc import Sequence

from src.salvo.game.grid import Grid
from src.salvo.game.labels import column_label
from src.salvo.game.models import Cell

GLYPHS: dict[Cell, str] = {
    Cell.EMPTY: " ",
    Cell.SHIP: "■",
    Cell.HIT: "X",
    Cell.MISS: "•",
    Cell.SUNK: "☐",
}
ORIGIN_MARK = "o"

MIN_CELL_WIDTH = 3


def glyph(cell: Cell, *, reveal_ships: bool = False) -> str:
    if cell is Cell.SHIP and not reveal_ships:
        return GLYPHS[Cell.EMPTY]
    return GLYPHS[cell]


def _table(rows: list[list[str]], title: str = "") -> str:
    height, width = len(rows), len(rows[0])
    labels = [column_label(j) for j in range(width)]
    w = max(MIN_CELL_WIDTH, max(len(label) for label in labels) + 2)
    hw = max(MIN_CELL_WIDTH, len(str(height)) + 2)

    def rule(left: str, cross: str, mid: str, right: str, fill: str) -> str:
        return left + fill * hw + cross + mid.join(fill * w for _ in labels) + right

    lines = [
        rule("╔", "╦", "╤", "╗", "═"),
        "║" + title[:hw].center(hw) + "║"
        + "│".join(label.center(w) for label in labels) + "║",
        rule("╠", "╬", "╪", "╣", "═"),
    ]
    for r, row in enumerate(rows):
        if r:
            lines.append(rule("╟", "╫", "┼", "╢", "─"))
        lines.append(
            "║" + str(r + 1).center(hw) + "║"
            + "│".join(s.center(w) for s in row) + "║",
        )
    lines.append(rule("╚", "╩", "╧", "╝", "═"))
    return "\n".join(lines)


def render_grid(
    grid: Grid | Sequence[Sequence[Cell]],
    *,
    reveal_ships: bool = False,
    title: str = "",
) -> str:
    """Return *grid* as a bordered table with lettered columns and numbered rows."""
    cells = grid.snapshot() if isinstance(grid, Grid) else grid
    rows = [[glyph(c, reveal_ships=reveal_ships) for c in row] for row in cells]
    return _table(rows, title)


def render_placement_options(
    grid: Grid,
    origin: tuple[int, int],
    corners: Sequence[tuple[int, int]],
) -> str:
    """Mark *origin* and number the far corner of each candidate from 1.

    When two candidates share a corner only the first number is shown.
    """
    rows = [[glyph(c, reveal_ships=True) for c in row] for row in grid.snapshot()]
    rows[origin[0]][origin[1]] = ORIGIN_MARK
    for n, (r, c) in enumerate(corners, start=1):
        if rows[r][c] == GLYPHS[Cell.EMPTY]:
            rows[r][c] = str(n)
    return _table(rows)
