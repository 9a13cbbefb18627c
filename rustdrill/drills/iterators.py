"""Iterator drills: walking a list and capitalising words."""

from __future__ import annotations


def favorite_fruits() -> list[str]:
    return ["banana", "custard apple", "avocado", "peach", "raspberry"]


def capitalize_first(text: str) -> str:
    """Upper-case the first character if it is ASCII; leave the rest alone."""
    if not text:
        return ""
    first = text[0]
    if first.isascii():
        first = first.upper()
    return first + text[1:]


def capitalize_words_vector(words) -> list[str]:
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words) -> str:
    return "".join(capitalize_first(word) for word in words)