"""Vector drills: building lists and doubling their elements."""

from __future__ import annotations


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed-size tuple and a list holding the same elements."""
    array = (10, 20, 30, 40)
    vector = [10, 20, 30, 40]
    return array, vector


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of ``values`` in place and return the list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values) -> list[int]:
    """A new list with every element doubled."""
    return [value * 2 for value in values]