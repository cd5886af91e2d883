"""
Type-level counters
===================

Натуральные числа Пеано для выбора среди повторяющихся типов.

A counter is ``Zero`` or ``Successor`` of a smaller counter. Selectors use
it to say how many positions to walk from the native end of a sequence
before matching the requested type:

    counter(0)  # Zero()
    counter(2)  # Successor(Successor(Zero()))
    counter(2).index  # 2
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ._types import CounterLike


class Counter(ABC):
    """Peano ordinal used only to disambiguate selector lookups."""

    __slots__ = ()

    @property
    @abstractmethod
    def index(self) -> int: ...

    def succ(self) -> Successor[Counter]:
        return Successor(self)

    def __index__(self) -> int:
        return self.index

    def __int__(self) -> int:
        return self.index


@dataclass(frozen=True, slots=True)
class Zero(Counter):
    @property
    def index(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "Zero()"


@dataclass(frozen=True, slots=True)
class Successor[I: Counter](Counter):
    prev: I

    def __post_init__(self) -> None:
        if not isinstance(self.prev, Counter):
            raise TypeError("Successor.prev must be a Counter")

    @property
    def index(self) -> int:
        return self.prev.index + 1

    def __repr__(self) -> str:
        return f"Successor({self.prev!r})"


ZERO = Zero()


def counter(n: int) -> Counter:
    """Build the counter whose ordinal is ``n``."""
    if n < 0:
        raise ValueError("counter ordinal must be >= 0")
    result: Counter = ZERO
    for _ in range(n):
        result = Successor(result)
    return result


def as_counter(value: CounterLike) -> Counter:
    """Normalize ``Counter | int`` into a Counter."""
    if isinstance(value, Counter):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected Counter or int, got {type(value).__name__}")
    return counter(value)


__all__ = (
    "ZERO",
    "Counter",
    "Successor",
    "Zero",
    "as_counter",
    "counter",
)
