"""
Left-folded HList
=================

Левосвёрнутый список: новые элементы добавляются в хвост.

A left-folded sequence is Terminal or ``LNode(prior, element)`` where
``prior`` holds everything before ``element``:

    NIL.append(1).append("a")   # LNode(LNode(NIL, 1), "a")  ~  (((), 1), "a")
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
    from .right import RHList


class LHList(HList):
    """Left-folded sequence: grows natively at the tail."""

    __slots__ = ()

    side: ClassVar[Side | None] = "left"

    # Base algebra

    def append[E](self, element: E, /) -> LNode[typing.Self, E]:
        self._take("append")
        return LNode(self, element)

    def prepend[E](self, element: E, /) -> LHList:
        from ..ops.insert import prepend_l

        self._take("prepend")
        return prepend_l(self, element)

    # Endpoints

    def first(self) -> typing.Any:
        from ..ops.ends import first_l

        self._read("first")
        return first_l(self)

    def last(self) -> typing.Any:
        from ..ops.ends import last_l

        self._read("last")
        return last_l(self)

    def first_mut(self) -> Slot[typing.Any]:
        from ..ops.ends import first_node_l

        self._read("first_mut")
        return self._slot(first_node_l(self), "first_mut")

    def last_mut(self) -> Slot[typing.Any]:
        from ..ops.ends import last_node_l

        self._read("last_mut")
        return self._slot(last_node_l(self), "last_mut")

    # Isomorphisms

    def invert(self) -> RHList:
        from ..ops.invert import invert_l

        self._take("invert")
        return invert_l(self)

    def reverse(self) -> LHList:
        from ..ops.reverse import reverse_l

        self._take("reverse")
        return reverse_l(self)

    def map(self, f: Mapper[typing.Any, typing.Any], /) -> LHList:
        from ..ops.transform import map_l

        self._read("map")
        mapped = map_l(self, f)
        self._take("map")
        return mapped

    # Selector

    def select[T](self, needle: Needle[T], counter: CounterLike | None = None) -> Result[T, SelectorError]:
        from ..ops.select import select_l

        self._read("select")
        return select_l(self, needle, counter)

    def get_mut[T](self, needle: Needle[T], counter: CounterLike | None = None) -> Slot[T]:
        from ..ops.select import locate_l, unwrap_located

        self._read("get_mut")
        return self._slot(unwrap_located(locate_l(self, needle, counter)), "get_mut")

    def candidates(self, needle: type) -> tuple[int, ...]:
        from ..ops.select import candidates_l

        self._read("candidates")
        return candidates_l(self, needle)

    # Tagged variant

    def append_indexed[E](self, value: E, /, *, tag: int | None = None) -> LHList:
        from ..indexed.tagged import append_indexed_l

        self._read("append_indexed")
        grown = append_indexed_l(self, value, tag=tag)
        self._take("append_indexed")
        return grown

    def prepend_indexed[E](self, value: E, /, *, tag: int | None = None) -> LHList:
        from ..indexed.tagged import prepend_indexed_l

        self._read("prepend_indexed")
        grown = prepend_indexed_l(self, value, tag=tag)
        self._take("prepend_indexed")
        return grown

    def __iter__(self) -> Iterator[typing.Any]:
        from ..ops.transform import elements_l

        self._read("iter")
        return elements_l(self)

    def _slot(self, node: LNode[typing.Any, typing.Any], operation: str) -> Slot[typing.Any]:
        raise NotImplementedError


class LNode[P: LHList, E](LHList):
    """Non-empty left-folded sequence: ``(prior, element)``."""

    __slots__ = ("_prior", "_element", "_length", "_ownership")
    __match_args__ = ("prior", "element")

    def __init__(self, prior: P, element: E, /) -> None:
        self._prior = prior
        self._element = element
        self._length = prior.length + 1
        self._ownership = Ownership()

    @property
    def prior(self) -> P:
        """Everything before ``element``."""
        return self._prior

    @property
    def element(self) -> E:
        """The logically last element."""
        return self._element

    @property
    def length(self) -> int:
        return self._length

    def _store(self, value: E) -> None:
        self._element = value

    def _read(self, operation: str) -> None:
        self._ownership.read(operation)

    def _take(self, operation: str) -> None:
        self._ownership.take(operation)

    def _slot(self, node: LNode[typing.Any, typing.Any], operation: str) -> Slot[typing.Any]:
        return Slot(self._ownership, node, operation)


__all__ = ("LHList", "LNode")
