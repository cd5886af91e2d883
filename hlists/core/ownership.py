"""
Ownership
=========

Runtime stand-in for move semantics and exclusive borrows.

Growth and conversion operations consume their receiver: the old sequence
is spliced into (or rebuilt as) the new one and cannot be used again, not
even for reads, since its nodes may now be borrowed through the new one.
Mutable access goes through a ``Slot`` that is only usable inside a
``with`` block; while it is open the owning sequence rejects every other
operation.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from typing import Final

from .._errors import BorrowError, ConsumedError, ElementTypeError

if typing.TYPE_CHECKING:
    from types import TracebackType

    from .left import LNode
    from .right import RNode

_logger: Final[logging.Logger] = logging.getLogger(__name__)


class Ownership:
    """Per-sequence state: who consumed it, whether a Slot is open on it."""

    __slots__ = ("_consumed_by", "_borrowed")

    def __init__(self) -> None:
        self._consumed_by: str | None = None
        self._borrowed = False

    @property
    def consumed(self) -> bool:
        return self._consumed_by is not None

    @property
    def borrowed(self) -> bool:
        return self._borrowed

    def read(self, operation: str) -> None:
        """Any use at all: rejected during a borrow and after consumption."""
        if self._borrowed:
            _logger.debug("rejecting %s(): sequence is borrowed", operation)
            raise BorrowError(operation)
        if self._consumed_by is not None:
            _logger.debug(
                "rejecting %s(): already consumed by %s()", operation, self._consumed_by
            )
            raise ConsumedError(operation, self._consumed_by)

    def take(self, operation: str) -> None:
        """Mark as consumed by ``operation``."""
        self.read(operation)
        self._consumed_by = operation

    def borrow(self, operation: str) -> None:
        self.read(operation)
        self._borrowed = True

    def release(self) -> None:
        self._borrowed = False

    def __repr__(self) -> str:
        return f"Ownership(consumed_by={self._consumed_by!r}, borrowed={self._borrowed})"


class Slot[T]:
    """
    Exclusive write access to exactly one element of a sequence.

    Usage:
        with seq.last_mut() as slot:
            slot.set(slot.get() + 1)

    The element's type is fixed: ``set`` only accepts a value of the same
    type as the current one.
    """

    __slots__ = ("_owner", "_node", "_operation", "_open")

    def __init__(self, owner: Ownership, node: LNode[typing.Any, T] | RNode[T, typing.Any], operation: str) -> None:
        self._owner = owner
        self._node = node
        self._operation = operation
        self._open = False

    def __enter__(self) -> Slot[T]:
        self._owner.borrow(self._operation)
        self._open = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._open = False
        self._owner.release()

    def _check_open(self) -> None:
        if not self._open:
            raise BorrowError(
                self._operation, f"{self._operation}() slot used outside its with-block"
            )

    def get(self) -> T:
        self._check_open()
        return self._node.element

    def set(self, value: T) -> None:
        self._check_open()
        current = self._node.element
        if type(value) is not type(current):
            raise ElementTypeError(type(current), type(value))
        self._node._store(value)

    def update(self, f: Callable[[T], T], /) -> T:
        """Apply ``f`` to the element, store and return the new value."""
        value = f(self.get())
        self.set(value)
        return value

    def __repr__(self) -> str:
        state = "open" if self._open else "closed"
        return f"Slot({self._operation}, {state})"


__all__ = ("Ownership", "Slot")
