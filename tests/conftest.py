"""Shared fixtures: seeded randomness and fresh boards."""

from __future__ import annotations

import random

import pytest

from src.salvo.game.engine import Board

TEST_SEED = 1234


@pytest.fixture()
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(TEST_SEED)


@pytest.fixture()
def board() -> Board:
    """Empty standard 10x10 board."""
    return Board()


@pytest.fixture()
def attacker() -> Board:
    """Empty board used as the firing side."""
    return Board()

