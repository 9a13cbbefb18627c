"""Primitive type drills: booleans, characters, arrays, slices and tuples."""

from __future__ import annotations

_MIN_ARRAY_SIZE = 100


def time_greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that apply at the given time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def check_array_size(items) -> str:
    """Accept a collection of at least 100 elements; raise ValueError otherwise."""
    if len(items) >= _MIN_ARRAY_SIZE:
        return "Wow, that's a big array!"
    raise ValueError("Array not big enough, more elements needed")


def nice_slice(items):
    """The elements at positions 1 to 3 of a sequence of at least four items."""
    if len(items) < 4:
        raise IndexError(f"range end index 4 out of range for length {len(items)}")
    return items[1:4]


def describe_cat(cat) -> str:
    """Unpack a (name, age) pair into a sentence."""
    name, age = cat
    return f"{name} is {age} years old."


def second(numbers):
    """The second element of a tuple."""
    return numbers[1]