"""Fruit baskets and a football scores table built with dictionaries."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and five pieces of fruit."""
    basket = {"apple": 3, "banana": 5, "mango": 1}
    basket["banana"] = 2
    return basket


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every kind of fruit missing from the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def _record(scores: dict[str, Team], name: str, scored: int, conceded: int) -> None:
    team = scores.setdefault(name, Team(name))
    team.goals_scored += scored
    team.goals_conceded += conceded
    if team.goals_scored > _U8_MAX or team.goals_conceded > _U8_MAX:
        raise OverflowError(f"goal count for {name} exceeds {_U8_MAX}")


def build_scores_table(results: str) -> dict[str, Team]:
    """Build the scores table from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1 = _parse_goals(fields[2])
        goals_2 = _parse_goals(fields[3])
        _record(scores, team_1, goals_1, goals_2)
        _record(scores, team_2, goals_2, goals_1)
    return scores