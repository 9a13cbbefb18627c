"""Quiz drills: pricing, a string-transforming machine and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_COMMAND_KINDS = ("uppercase", "trim", "append")


def calculate_price_of_apples(number: int) -> int:
    """Two per apple, or one per apple for orders of more than 40."""
    return number * 2 if number <= 40 else number


@dataclass(frozen=True)
class Command:
    """An action to apply to a string: "uppercase", "trim" or "append" (times)."""

    kind: str
    times: int = 0

    def __post_init__(self) -> None:
        if self.kind not in _COMMAND_KINDS:
            raise ValueError(f"unknown command: {self.kind!r}")
        if self.times < 0:
            raise ValueError("times must not be negative")


def transformer(inputs) -> list[str]:
    """Apply each (string, Command) pair and collect the results in order."""
    output = []
    for text, command in inputs:
        if command.kind == "uppercase":
            output.append(text.upper())
        elif command.kind == "trim":
            output.append(text.strip())
        else:
            output.append(text + "bar" * command.times)
    return output


def _display(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with a numeric or alphabetic grade."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )