"""Bijective base-26 column labels (A..Z, AA, AB, ...)."""

from __future__ import annotations

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE = len(ALPHABET)


def column_label(index: int) -> str:
    """Return the spreadsheet-style label for a zero-based column index."""
    if index < 0:
        raise ValueError(f"column index must be >= 0, got {index}")
    label = ""
    n = index + 1
    while n:
        n, rem = divmod(n - 1, BASE)
        label = ALPHABET[rem] + label
    return label


def parse_column(label: str) -> int:
    """Inverse of :func:`column_label`; case-insensitive."""
    text = label.strip().upper()
    if not text or any(ch not in ALPHABET for ch in text):
        raise ValueError(f"invalid column label: {label!r}")
    n = 0
    for ch in text:
        n = n * BASE + ALPHABET.index(ch) + 1
    return n - 1
