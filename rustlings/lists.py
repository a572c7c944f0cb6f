"""Cons lists and a clone-on-write sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(5, Nil())


class Cow:
    """A sequence that is borrowed until it must be changed, then owned."""

    def __init__(self, data: Sequence[int], owned: bool = False):
        self.data = data
        self.owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        return cls(data, owned=False)

    @classmethod
    def from_owned(cls, data: list[int]) -> Cow:
        return cls(data, owned=True)

    def to_mut(self) -> list[int]:
        """Return a mutable list, copying borrowed data first."""
        if not self.owned:
            self.data = list(self.data)
            self.owned = True
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def __repr__(self) -> str:
        kind = "Owned" if self.owned else "Borrowed"
        return f"Cow.{kind}({list(self.data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying only when a change is needed."""
    for index, value in enumerate(cow.data):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow