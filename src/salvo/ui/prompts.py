"""Console input loops that re-prompt until the answer is in range."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from src.salvo.game.labels import column_label, parse_column

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Answer:
    """A parsed console answer, or the message explaining why it was refused."""

    value: int | None = None
    error: str = ""

    def __bool__(self) -> bool:
        return self.value is not None

    @classmethod
    def accept(cls, value: int) -> Answer:
        return cls(value=value)

    @classmethod
    def reject(cls, message: str) -> Answer:
        return cls(error=message)


def validate_row(text: str, height: int) -> Answer:
    """Parse a 1-based row number; returns the zero-based row."""
    try:
        value = int(text.strip())
    except ValueError:
        return Answer.reject("Row must be a whole number.")
    if not 1 <= value <= height:
        return Answer.reject(f"Row must be between 1 and {height}.")
    return Answer.accept(value - 1)


def validate_column(text: str, width: int) -> Answer:
    """Parse a column label such as ``C`` or ``AB``; returns its index."""
    last = column_label(width - 1)
    try:
        value = parse_column(text)
    except ValueError:
        return Answer.reject("Column must be letters, e.g. A or AB.")
    if value >= width:
        return Answer.reject(f"Column must be between A and {last}.")
    return Answer.accept(value)


def validate_choice(text: str, count: int) -> Answer:
    """Parse a 1-based menu choice; returns the zero-based index."""
    try:
        value = int(text.strip())
    except ValueError:
        return Answer.reject("Choice must be a number.")
    if not 1 <= value <= count:
        return Answer.reject(f"Choice must be between 1 and {count}.")
    return Answer.accept(value - 1)


class Prompter:
    """Blocking question/answer loop over injectable I/O callables."""

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def say(self, message: str) -> None:
        self.output_fn(message)

    def _ask(self, question: str, validate: Callable[[str], Answer]) -> int:
        while True:
            answer = validate(self.input_fn(question))
            if answer:
                return answer.value
            logger.debug("Rejected input: %s", answer.error)
            self.output_fn(answer.error)

    def ask_row(self, height: int, question: str = "Row") -> int:
        return self._ask(f"{question} [1-{height}]: ", lambda t: validate_row(t, height))

    def ask_column(self, width: int, question: str = "Column") -> int:
        last = column_label(width - 1)
        return self._ask(f"{question} [A-{last}]: ", lambda t: validate_column(t, width))

    def ask_choice(self, count: int, question: str = "Choice") -> int:
        return self._ask(f"{question} [1-{count}]: ", lambda t: validate_choice(t, count))
