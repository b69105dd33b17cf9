"""Exception hierarchy for the game engine."""

from __future__ import annotations


class SalvoError(Exception):
    """Base class for engine errors."""


class OutOfBoundsError(SalvoError, IndexError):
    """A coordinate fell outside the grid; always a caller bug."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(
            f"({row}, {col}) is outside a {height}x{width} grid",
        )
        self.row = row
        self.col = col


class PlacementError(SalvoError):
    """Raised when a fleet cannot be laid out or a shape is malformed."""
