"""
Unified HList
=============

Единый интерфейс для левых и правых списков.

``HList`` is the capability interface shared by both representations.
Consumers should depend on these named operations only, never on the
nesting of nodes, so that the representation can be swapped freely:

    seq = NIL.append(1).append("two").append(3.0)   # left-folded
    seq.first()        # 1
    seq.get(str)       # "two"
    seq.invert()       # right-folded, same order
"""

from __future__ import annotations

import typing
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import ClassVar

from kungfu import Error, Ok, Result

from .._errors import SelectorError
from .._helpers import format_elements, same_element, type_name
from .._types import CounterLike, Mapper, Needle, Side

if typing.TYPE_CHECKING:
    from ..indexed.lookup import TagPolicy
    from .ownership import Slot


class HList(ABC):
    """Heterogeneous sequence: Terminal or a node wrapping a smaller sequence."""

    __slots__ = ()

    # None for Terminal, which is both representations at once
    side: ClassVar[Side | None] = None

    # ------------------------------------------------------------------
    # Ownership hooks (Terminal is a plain copyable value)
    # ------------------------------------------------------------------

    def _read(self, operation: str) -> None:
        _ = operation

    def _take(self, operation: str) -> None:
        _ = operation

    # ------------------------------------------------------------------
    # Base algebra
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def length(self) -> int: ...

    @abstractmethod
    def append[E](self, element: E, /) -> HList:
        """Insert ``element`` as the new last element. Consumes ``self``."""

    @abstractmethod
    def prepend[E](self, element: E, /) -> HList:
        """Insert ``element`` as the new first element. Consumes ``self``."""

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    @abstractmethod
    def first(self) -> typing.Any: ...

    @abstractmethod
    def last(self) -> typing.Any: ...

    @abstractmethod
    def first_mut(self) -> Slot[typing.Any]: ...

    @abstractmethod
    def last_mut(self) -> Slot[typing.Any]: ...

    # ------------------------------------------------------------------
    # Isomorphisms
    # ------------------------------------------------------------------

    @abstractmethod
    def invert(self) -> HList:
        """Same order, other representation. Consumes ``self``."""

    @abstractmethod
    def reverse(self) -> HList:
        """Same representation, reversed order. Consumes ``self``."""

    @abstractmethod
    def map(self, f: Mapper[typing.Any, typing.Any], /) -> HList:
        """Structural map: same representation and order. Consumes ``self``."""

    # ------------------------------------------------------------------
    # Selector
    # ------------------------------------------------------------------

    @abstractmethod
    def select[T](self, needle: Needle[T], counter: CounterLike | None = None) -> Result[T, SelectorError]:
        """
        Look up the element of type ``needle``.

        Without a counter the needle must occur exactly once. With a counter
        the element ``counter`` positions away from the native end must be
        exactly of type ``needle``.
        """

    @abstractmethod
    def get_mut[T](self, needle: Needle[T], counter: CounterLike | None = None) -> Slot[T]: ...

    @abstractmethod
    def candidates(self, needle: type) -> tuple[int, ...]:
        """Every counter at which ``needle`` occurs."""

    def get[T](self, needle: Needle[T], counter: CounterLike | None = None) -> T:
        match self.select(needle, counter):
            case Ok(value):
                return value
            case Error(err):
                raise err

    # ------------------------------------------------------------------
    # Tagged variant
    # ------------------------------------------------------------------

    @abstractmethod
    def append_indexed[E](self, value: E, /, *, tag: int | None = None) -> HList: ...

    @abstractmethod
    def prepend_indexed[E](self, value: E, /, *, tag: int | None = None) -> HList: ...

    def is_indexed(self) -> bool:
        from ..indexed.tagged import is_indexed

        self._read("is_indexed")
        return is_indexed(self)

    def tags(self) -> tuple[int, ...]:
        from ..indexed.tagged import tags

        self._read("tags")
        return tags(self)

    def unindexed(self) -> HList:
        """Strip the tag carrier from every element. Consumes ``self``."""
        from ..indexed.tagged import unindexed

        self._read("unindexed")
        stripped = unindexed(self)
        self._take("unindexed")
        return stripped

    def get_tagged(self, tag: int, *, policy: TagPolicy | None = None) -> typing.Any:
        from ..indexed.lookup import TagPolicy, get_tagged

        self._read("get_tagged")
        return get_tagged(self, tag, policy=policy or TagPolicy())

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @abstractmethod
    def __iter__(self) -> Iterator[typing.Any]:
        """Elements in logical order, first to last."""

    def __len__(self) -> int:
        self._read("len")
        return self.length

    @property
    def signature(self) -> tuple[type, ...]:
        """Element types in logical order; the identity of the sequence."""
        from ..ops.transform import elements

        self._read("signature")
        return tuple(type(element) for element in elements(self))

    def shape(self) -> str:
        """Nested type signature in the pair encoding, e.g. ``((((), int), str), float)``."""
        from ..ops.transform import shape

        self._read("shape")
        return shape(self)

    def to_pairs(self) -> tuple[typing.Any, ...]:
        """Export as nested Python pairs, ``()`` standing for Terminal."""
        from ..ops.transform import to_pairs

        self._read("to_pairs")
        return to_pairs(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HList):
            return NotImplemented
        from ..ops.transform import elements

        self._read("eq")
        other._read("eq")
        if self.length != other.length:
            return False
        if self.length == 0:
            return True
        if self.side != other.side:
            return False
        return all(
            same_element(a, b) for a, b in zip(elements(self), elements(other), strict=True)
        )

    def __repr__(self) -> str:
        from ..ops.transform import elements

        # no ownership check: repr stays usable on consumed and borrowed sequences
        return f"{self._family}[{format_elements(elements(self))}]"

    @property
    def _family(self) -> str:
        return "LHList" if self.side == "left" else "RHList"

    def describe(self) -> str:
        """``LHList[int, str, float]``-style description of the signature."""
        names = ", ".join(type_name(tp) for tp in self.signature)
        return f"{self._family}[{names}]"


__all__ = ("HList",)
