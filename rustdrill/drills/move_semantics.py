"""Ownership drills: extending lists, fresh copies and strings."""

from __future__ import annotations


def fill_vec(values) -> list[int]:
    """A new list holding ``values`` followed by 88; the input is left as it was."""
    return [*values, 88]


def new_filled_vec() -> list[int]:
    """A list built from scratch and extended with 88."""
    values = [22, 44, 66]
    values.append(88)
    return values


def add_through_references(start: int) -> int:
    """Add 100 and then 1000 to ``start``, one step after the other."""
    value = start
    value += 100
    value += 1000
    return value


def last_char(data: str) -> str:
    """The last character of a non-empty string."""
    if not data:
        raise ValueError("string is empty")
    return data[-1]


def string_uppercase(data: str) -> str:
    return data.upper()