"""Conditional drills: comparisons and branching on strings."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where an animal lives, or "Unknown"."""
    identifier = {"crab": 1, "gopher": 2, "snake": 3}.get(animal, 4)
    return {1: "Beach", 2: "Burrow", 3: "Desert"}.get(identifier, "Unknown")