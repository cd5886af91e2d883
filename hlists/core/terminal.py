"""Terminal: the unique empty sequence, base case of both representations."""

from __future__ import annotations

import typing
from collections.abc import Iterator
from typing import ClassVar

from kungfu import Error, Result

from .._errors import ElementNotFoundError, SelectorError, ShapeError
from .._types import CounterLike, Mapper, Needle, Side
from .left import LHList, LNode
from .right import RHList, RNode

if typing.TYPE_CHECKING:
    from .ownership import Slot


class Terminal(LHList, RHList):
    """
    Empty sequence.

    Terminal is a valid left-folded *and* right-folded sequence, and a plain
    copyable value: no operation ever consumes it. ``append`` starts a
    left-folded sequence, ``prepend`` starts a right-folded one.
    """

    __slots__ = ()

    side: ClassVar[Side | None] = None

    _instance: ClassVar[Terminal | None] = None

    def __new__(cls) -> Terminal:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def length(self) -> int:
        return 0

    def append[E](self, element: E, /) -> LNode[Terminal, E]:
        return LNode(self, element)

    def prepend[E](self, element: E, /) -> RNode[E, Terminal]:
        return RNode(element, self)

    def first(self) -> typing.NoReturn:
        raise ShapeError("first", "Terminal")

    def last(self) -> typing.NoReturn:
        raise ShapeError("last", "Terminal")

    def first_mut(self) -> Slot[typing.Any]:
        raise ShapeError("first_mut", "Terminal")

    def last_mut(self) -> Slot[typing.Any]:
        raise ShapeError("last_mut", "Terminal")

    def invert(self) -> Terminal:
        return self

    def reverse(self) -> Terminal:
        return self

    def map(self, f: Mapper[typing.Any, typing.Any], /) -> Terminal:
        _ = f
        return self

    def select[T](self, needle: Needle[T], counter: CounterLike | None = None) -> Result[T, SelectorError]:
        from ..counters import as_counter

        index = None if counter is None else as_counter(counter).index
        return Error(ElementNotFoundError(needle, index, "sequence is empty"))

    def get_mut[T](self, needle: Needle[T], counter: CounterLike | None = None) -> Slot[T]:
        from ..counters import as_counter

        index = None if counter is None else as_counter(counter).index
        raise ElementNotFoundError(needle, index, "sequence is empty")

    def candidates(self, needle: type) -> tuple[int, ...]:
        _ = needle
        return ()

    def append_indexed[E](self, value: E, /, *, tag: int | None = None) -> LHList:
        from ..indexed.tagged import append_indexed_l

        return append_indexed_l(self, value, tag=tag)

    def prepend_indexed[E](self, value: E, /, *, tag: int | None = None) -> RHList:
        from ..indexed.tagged import prepend_indexed_r

        return prepend_indexed_r(self, value, tag=tag)

    def unindexed(self) -> Terminal:
        return self

    def __iter__(self) -> Iterator[typing.Any]:
        return iter(())

    def __hash__(self) -> int:
        return hash(())

    def __repr__(self) -> str:
        return "NIL"

    def describe(self) -> str:
        return "Terminal"

    def __copy__(self) -> Terminal:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Terminal:
        return self

    def __reduce__(self) -> str:
        return "NIL"


NIL: typing.Final[Terminal] = Terminal()


__all__ = ("NIL", "Terminal")
