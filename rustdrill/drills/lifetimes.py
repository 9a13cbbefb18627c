"""Lifetime drills: choosing the longer string and a book of borrowed names."""

from __future__ import annotations

from dataclasses import dataclass


def longest(x: str, y: str) -> str:
    """The longer string; the second one when they are the same length."""
    return x if len(x) > len(y) else y


@dataclass(frozen=True)
class Book:
    author: str
    title: str

    def describe(self) -> str:
        return f"{self.title} by {self.author}"