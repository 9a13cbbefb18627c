"""Introductory drills: greetings, variables and simple functions."""

from __future__ import annotations

_INTRO_LINES = (
    "Hello and",
    "       welcome to rustdrill!",
    "",
    "This exercise compiles successfully. The remaining exercises contain a compiler",
    "or logic error. The central concept behind these exercises is to fix these errors and",
    "solve the exercises. Good luck!",
    "",
    "The source for this exercise is in `exercises/00_intro/intro1.rs`. Have a look!",
    "Going forward, the source of the exercises will always be in the success/failure output.",
    "",
    "If you want to use rust-analyzer, Rust's LSP implementation, make sure your editor is set",
    "up, and then run `rustdrill lsp` before continuing.",
)

NUMBER = 3


def intro_text() -> str:
    """The welcome text shown by the first exercise."""
    return "\n".join(_INTRO_LINES) + "\n"


def greeting() -> str:
    return "Hello there!"


def variables_demo() -> list[str]:
    """Lines printed by the variable exercises, in order."""
    lines = []
    x = 5
    lines.append(f"x has the value {x}")
    x = 0
    lines.append("x is ten!" if x == 10 else "x is not ten!")
    x = 1
    lines.append(f"Number {x}")
    x = 3
    lines.append(f"Number {x}")
    x = 5
    lines.append(f"Number {x}")
    number = "T-H-R-E-E"
    lines.append(f"Spell a Number : {number}")
    count = 3
    lines.append(f"Number plus two is : {count + 2}")
    lines.append(f"Number {NUMBER}")
    return lines


def ring_lines(num: int) -> list[str]:
    """One "Ring!" line per call, numbered from 1."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off even prices, three off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num