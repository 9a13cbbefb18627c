"""Module drills: private helpers, re-exported names and the system clock."""

from __future__ import annotations

import time

_PEAR = "Pear"
_APPLE = "Apple"
_CUCUMBER = "Cucumber"
_CARROT = "Carrot"


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    """Make a sausage, using the private recipe."""
    _get_secret_recipe()
    return "sausage!"


def favorite_snacks() -> str:
    """A sentence naming the favourite fruit and vegetable."""
    return f"favorite snacks: {_PEAR} and {_CUCUMBER}"


def seconds_since_epoch() -> int:
    """Whole seconds elapsed since 1970-01-01 00:00:00 UTC."""
    now = time.time()
    if now < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return int(now)