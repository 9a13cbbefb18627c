"""Hash map drills: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_GOALS = re.compile(r"\+?[0-9]+")
_MAX_GOALS = 255
_TOP_UP = 4


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five fruits."""
    return {"banana": 2, "apple": 2, "mango": 2}


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add every missing kind of fruit to ``basket``; fruit already present is left alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, _TOP_UP)
    return basket


@dataclass
class Team:
    """Goals a team scored and conceded over all its matches."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _GOALS.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > _MAX_GOALS:
        raise ValueError(f"goal count out of range: {text!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of "<team_1>,<team_2>,<goals_1>,<goals_2>"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _parse_goals(fields[2]), _parse_goals(fields[3])

        first = scores.setdefault(team_1, Team())
        first.goals_scored += goals_1
        first.goals_conceded += goals_2

        second = scores.setdefault(team_2, Team())
        second.goals_scored += goals_2
        second.goals_conceded += goals_1
    return scores