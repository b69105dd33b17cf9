"""Tests for console input validation and re-prompting."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from src.salvo.ui.prompts import (
    Answer,
    Prompter,
    validate_choice,
    validate_column,
    validate_row,
)

BOARD_SIZE = 10


def _prompter(answers: list[str], printed: list[str]) -> Prompter:
    replies = iter(answers)

    def fake_input(_question: str) -> str:
        return next(replies)

    return Prompter(input_fn=fake_input, output_fn=printed.append)


class TestValidators:
    def test_row_is_one_based(self: TestValidators) -> None:
        """Row 5 on screen is index 4."""
        result = validate_row(" 5 ", BOARD_SIZE)
        assert result
        assert result.value == 4

    @pytest.mark.parametrize("text", ["0", "11", "-1", "five", ""])
    def test_row_rejects(self: TestValidators, text: str) -> None:
        """Out-of-range and non-numeric rows fail with a message."""
        result = validate_row(text, BOARD_SIZE)
        assert not result
        assert result.error

    def test_column_accepts_last_label(self: TestValidators) -> None:
        """J is the last column of a 10-wide board."""
        assert validate_column("j", BOARD_SIZE).value == BOARD_SIZE - 1

    def test_column_out_of_range_names_last_label(self: TestValidators) -> None:
        """The error names the valid label range."""
        result = validate_column("K", BOARD_SIZE)
        assert not result
        assert result.error == "Column must be between A and J."

    def test_column_wide_board(self: TestValidators) -> None:
        """Two-letter labels work past Z."""
        assert validate_column("AB", 30).value == 27

    def test_first_row_is_a_valid_answer(self: TestValidators) -> None:
        """Index zero still counts as accepted."""
        assert validate_row("1", BOARD_SIZE) == Answer.accept(0)
        assert bool(Answer.accept(0)) is True
        assert bool(Answer.reject("no")) is False

    @pytest.mark.parametrize(
        ("validate", "text"),
        [(validate_column, "1"), (validate_choice, "x"), (validate_choice, "0")],
    )
    def test_malformed(self: TestValidators, validate: Callable, text: str) -> None:
        """Garbage input never validates."""
        assert not validate(text, 3)


class TestPrompter:
    def test_row_reprompts_until_valid(self: TestPrompter) -> None:
        """Each bad answer prints one error."""
        printed: list[str] = []
        prompter = _prompter(["0", "x", "3"], printed)
        assert prompter.ask_row(BOARD_SIZE) == 2
        assert len(printed) == 2

    def test_column_reprompts_until_valid(self: TestPrompter) -> None:
        """Column errors are shown before asking again."""
        printed: list[str] = []
        prompter = _prompter(["K", "1", "c"], printed)
        assert prompter.ask_column(BOARD_SIZE) == 2
        assert printed[0] == "Column must be between A and J."

    def test_choice(self: TestPrompter) -> None:
        """Choices are one-based on screen."""
        printed: list[str] = []
        prompter = _prompter(["4", "2"], printed)
        assert prompter.ask_choice(3) == 1
        assert printed == ["Choice must be between 1 and 3."]

    def test_question_shows_range(self: TestPrompter) -> None:
        """The question lists the valid column labels."""
        questions: list[str] = []

        def fake_input(question: str) -> str:
            questions.append(question)
            return "1"

        Prompter(input_fn=fake_input, output_fn=lambda _m: None).ask_column(28, "Target column")
        assert questions == ["Target column [A-AB]: "]

    def test_eof_propagates(self: TestPrompter) -> None:
        """Closed input is not swallowed."""
        def closed(_question: str) -> str:
            raise EOFError

        with pytest.raises(EOFError):
            Prompter(input_fn=closed).ask_row(BOARD_SIZE)
