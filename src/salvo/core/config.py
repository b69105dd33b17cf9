from __future__ import annotations

from typing import Final

from decouple import config


def _optional_int(name: str) -> int | None:
    """Return env var as int, or None if unset/blank."""
    value = config(name, default="", cast=str).strip()
    return int(value) if value else None


ENVIRONMENT: Final[str] = config("ENVIRONMENT", default="production")
DEBUG: Final[bool] = ENVIRONMENT != "production"

# --- Board geometry ---
BOARD_HEIGHT: Final[int] = config("SALVO_BOARD_HEIGHT", default=10, cast=int)
BOARD_WIDTH: Final[int] = config("SALVO_BOARD_WIDTH", default=10, cast=int)

# --- Session ---
PLAYERS: Final[int] = config("SALVO_PLAYERS", default=2, cast=int)
HUMANS: Final[int] = config("SALVO_HUMANS", default=0, cast=int)
MAX_TURNS: Final[int] = config("SALVO_MAX_TURNS", default=1000, cast=int)
SEED: Final[int | None] = _optional_int("SALVO_SEED")

# --- Logging ---
LOG_LEVEL: Final[str] = config("SALVO_LOG_LEVEL", default="WARNING").upper()
