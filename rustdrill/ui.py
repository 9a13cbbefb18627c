"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

_CODES = {
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "underlined": 4,
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}
_RESET = "\x1b[0m"


def style(text, *args) -> str:
    """Wrap ``text`` in the ANSI codes named by ``args`` (e.g. "red", "bold")."""
    text = str(text)
    if not args:
        return text
    try:
        prefix = "".join(f"\x1b[{_CODES[name]}m" for name in args)
    except KeyError as exc:
        raise ValueError(f"unknown style: {exc.args[0]!r}") from None
    return f"{prefix}{text}{_RESET}"


def _announce(emoji: str, plain: str, colour: str, message: str) -> str:
    symbol = plain if "NO_EMOJI" in os.environ else emoji
    line = f"{style(symbol, colour)} {style(message, colour)}"
    print(line)
    return line


def warn(message) -> str:
    """Print a red warning line and return it."""
    return _announce("⚠️ ", "!", "red", str(message))


def success(message) -> str:
    """Print a green success line and return it."""
    return _announce("✅", "✓", "green", str(message))