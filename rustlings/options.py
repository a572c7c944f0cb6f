"""How much ice cream is left at a given hour."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces left at the given hour (0-23), or None for an invalid hour."""
    if time_of_day < 0:
        raise ValueError(f"hour cannot be negative: {time_of_day}")
    if time_of_day > 23:
        return None
    if time_of_day < 22:
        return 5
    return 0