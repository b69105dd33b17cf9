"""Tests for bijective base-26 column labels."""

from __future__ import annotations

import pytest

from src.salvo.game.labels import column_label, parse_column

ROUND_TRIP_LIMIT = 1000


class TestColumnLabel:
    @pytest.mark.parametrize(
        ("index", "label"),
        [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"),
         (52, "BA"), (701, "ZZ"), (702, "AAA")],
    )
    def test_known_labels(self: TestColumnLabel, index: int, label: str) -> None:
        """Labels have no zero digit: Z is followed by AA."""
        assert column_label(index) == label
        assert parse_column(label) == index

    def test_round_trip(self: TestColumnLabel) -> None:
        """parse_column inverts column_label across a wide range."""
        for x in range(ROUND_TRIP_LIMIT + 1):
            assert parse_column(column_label(x)) == x

    def test_parse_is_case_insensitive(self: TestColumnLabel) -> None:
        """Lower case and surrounding spaces are accepted."""
        assert parse_column("ab") == parse_column("AB")
        assert parse_column(" c ") == 2

    def test_negative_index_rejected(self: TestColumnLabel) -> None:
        """There is no label for a negative column."""
        with pytest.raises(ValueError, match="column index"):
            column_label(-1)

    @pytest.mark.parametrize("text", ["", "   ", "A1", "7", "Ä", "A-B"])
    def test_parse_rejects_non_letters(self: TestColumnLabel, text: str) -> None:
        """Only ASCII letters make a label."""
        with pytest.raises(ValueError, match="invalid column label"):
            parse_column(text)
