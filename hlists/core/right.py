"""
Right-folded HList
==================

Правосвёрнутый список: новые элементы добавляются в голову.

A right-folded sequence is Terminal or ``RNode(element, rest)`` where
``rest`` holds everything after ``element``:

    NIL.prepend("a").prepend(1)   # RNode(1, RNode("a", NIL))  ~  (1, ("a", ()))
"""

from __future__ import annotations

import typing
from collections.abc import Iterator
from typing import ClassVar

from kungfu import Result

from .._errors import SelectorError
from .._types import CounterLike, Mapper, Needle, Side
from .hlist import HList
from .ownership import Ownership, Slot

if typing.TYPE_CHECKING:
    from .left import LHList


class RHList(HList):
    """Right-folded sequence: grows natively at the head."""

    __slots__ = ()

    side: ClassVar[Side | None] = "right"

    # Base algebra

    def prepend[E](self, element: E, /) -> RNode[E, typing.Self]:
        self._take("prepend")
        return RNode(element, self)

    def append[E](self, element: E, /) -> RHList:
        from ..ops.insert import append_r

        self._take("append")
        return append_r(self, element)

    # Endpoints

    def first(self) -> typing.Any:
        from ..ops.ends import first_r

        self._read("first")
        return first_r(self)

    def last(self) -> typing.Any:
        from ..ops.ends import last_r

        self._read("last")
        return last_r(self)

    def first_mut(self) -> Slot[typing.Any]:
        from ..ops.ends import first_node_r

        self._read("first_mut")
        return self._slot(first_node_r(self), "first_mut")

    def last_mut(self) -> Slot[typing.Any]:
        from ..ops.ends import last_node_r

        self._read("last_mut")
        return self._slot(last_node_r(self), "last_mut")

    # Isomorphisms

    def invert(self) -> LHList:
        from ..ops.invert import invert_r

        self._take("invert")
        return invert_r(self)

    def reverse(self) -> RHList:
        from ..ops.reverse import reverse_r

        self._take("reverse")
        return reverse_r(self)

    def map(self, f: Mapper[typing.Any, typing.Any], /) -> RHList:
        from ..ops.transform import map_r

        self._read("map")
        mapped = map_r(self, f)
        self._take("map")
        return mapped

    # Selector

    def select[T](self, needle: Needle[T], counter: CounterLike | None = None) -> Result[T, SelectorError]:
        from ..ops.select import select_r

        self._read("select")
        return select_r(self, needle, counter)

    def get_mut[T](self, needle: Needle[T], counter: CounterLike | None = None) -> Slot[T]:
        from ..ops.select import locate_r, unwrap_located

        self._read("get_mut")
        return self._slot(unwrap_located(locate_r(self, needle, counter)), "get_mut")

    def candidates(self, needle: type) -> tuple[int, ...]:
        from ..ops.select import candidates_r

        self._read("candidates")
        return candidates_r(self, needle)

    # Tagged variant

    def prepend_indexed[E](self, value: E, /, *, tag: int | None = None) -> RHList:
        from ..indexed.tagged import prepend_indexed_r

        self._read("prepend_indexed")
        grown = prepend_indexed_r(self, value, tag=tag)
        self._take("prepend_indexed")
        return grown

    def append_indexed[E](self, value: E, /, *, tag: int | None = None) -> RHList:
        from ..indexed.tagged import append_indexed_r

        self._read("append_indexed")
        grown = append_indexed_r(self, value, tag=tag)
        self._take("append_indexed")
        return grown

    def __iter__(self) -> Iterator[typing.Any]:
        from ..ops.transform import elements_r

        self._read("iter")
        return elements_r(self)

    def _slot(self, node: RNode[typing.Any, typing.Any], operation: str) -> Slot[typing.Any]:
        raise NotImplementedError


class RNode[E, R: RHList](RHList):
    """Non-empty right-folded sequence: ``(element, rest)``."""

    __slots__ = ("_element", "_rest", "_length", "_ownership")
    __match_args__ = ("element", "rest")

    def __init__(self, element: E, rest: R, /) -> None:
        self._element = element
        self._rest = rest
        self._length = rest.length + 1
        self._ownership = Ownership()

    @property
    def element(self) -> E:
        """The head element."""
        return self._element

    @property
    def rest(self) -> R:
        """Everything after ``element``."""
        return self._rest

    @property
    def length(self) -> int:
        return self._length

    def _store(self, value: E) -> None:
        self._element = value

    def _read(self, operation: str) -> None:
        self._ownership.read(operation)

    def _take(self, operation: str) -> None:
        self._ownership.take(operation)

    def _slot(self, node: RNode[typing.Any, typing.Any], operation: str) -> Slot[typing.Any]:
        return Slot(self._ownership, node, operation)


__all__ = ("RHList", "RNode")
