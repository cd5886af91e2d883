"""
Selector
========

Поиск элемента по типу и счётчику.

A selector walks ``counter`` positions from the native end of a sequence
(the last element of an LFS, the head of an RFS) and matches when the
element there is exactly of the requested type:

    seq = NIL.append(1).append("a").append(2)
    select_l(seq, str)               # Ok("a"), counter inferred as 1
    select_l(seq, int)               # Error(AmbiguousElementError), counters (0, 2)
    select_l(seq, int, counter(2))   # Ok(1)

Without a counter the needle must occur exactly once; an absent or
ambiguous needle is an ``Error``, never an arbitrary pick.
"""

from __future__ import annotations

import logging
import typing
from typing import Final

from kungfu import Error, Ok, Result

from .._errors import AmbiguousElementError, ElementNotFoundError, SelectorError
from .._helpers import type_name
from .._types import CounterLike, Needle
from ..core.left import LHList, LNode
from ..core.right import RHList, RNode
from ..counters import Counter, Successor, Zero, as_counter, counter

_logger: Final[logging.Logger] = logging.getLogger(__name__)

type Located[N] = Result[N, SelectorError]


# ============================================================================
# Left-folded
# ============================================================================


def _at_l(seq: LHList, needle: type, c: Counter, index: int) -> Located[LNode[typing.Any, typing.Any]]:
    match (seq, c):
        case (LNode(_, element), Zero()) if type(element) is needle:
            return Ok(seq)
        case (LNode(_, element), Zero()):
            return Error(ElementNotFoundError(needle, index, f"element there is {type_name(type(element))}"))
        case (LNode(prior, _), Successor(prev)):
            return _at_l(prior, needle, prev, index)
        case _:
            return Error(ElementNotFoundError(needle, index, "counter runs past the first element"))


def candidates_l(seq: LHList, needle: type) -> tuple[int, ...]:
    """Counters (distance from the last element) at which ``needle`` occurs."""
    found: list[int] = []
    node: LHList = seq
    index = 0
    while isinstance(node, LNode):
        if type(node.element) is needle:
            found.append(index)
        node = node.prior
        index += 1
    return tuple(found)


def locate_l(seq: LHList, needle: type, counter_: CounterLike | None = None) -> Located[LNode[typing.Any, typing.Any]]:
    """Find the node holding the selected element."""
    if counter_ is None:
        match _infer(candidates_l(seq, needle), needle):
            case Ok(index):
                return _at_l(seq, needle, counter(index), index)
            case Error(err):
                return Error(err)
    c = as_counter(counter_)
    return _at_l(seq, needle, c, c.index)


def select_l[T](seq: LHList, needle: Needle[T], counter_: CounterLike | None = None) -> Result[T, SelectorError]:
    return locate_l(seq, needle, counter_).map(lambda node: node.element)


# ============================================================================
# Right-folded
# ============================================================================


def _at_r(seq: RHList, needle: type, c: Counter, index: int) -> Located[RNode[typing.Any, typing.Any]]:
    match (seq, c):
        case (RNode(element, _), Zero()) if type(element) is needle:
            return Ok(seq)
        case (RNode(element, _), Zero()):
            return Error(ElementNotFoundError(needle, index, f"element there is {type_name(type(element))}"))
        case (RNode(_, rest), Successor(prev)):
            return _at_r(rest, needle, prev, index)
        case _:
            return Error(ElementNotFoundError(needle, index, "counter runs past the last element"))


def candidates_r(seq: RHList, needle: type) -> tuple[int, ...]:
    """Counters (distance from the head) at which ``needle`` occurs."""
    found: list[int] = []
    node: RHList = seq
    index = 0
    while isinstance(node, RNode):
        if type(node.element) is needle:
            found.append(index)
        node = node.rest
        index += 1
    return tuple(found)


def locate_r(seq: RHList, needle: type, counter_: CounterLike | None = None) -> Located[RNode[typing.Any, typing.Any]]:
    if counter_ is None:
        match _infer(candidates_r(seq, needle), needle):
            case Ok(index):
                return _at_r(seq, needle, counter(index), index)
            case Error(err):
                return Error(err)
    c = as_counter(counter_)
    return _at_r(seq, needle, c, c.index)


def select_r[T](seq: RHList, needle: Needle[T], counter_: CounterLike | None = None) -> Result[T, SelectorError]:
    return locate_r(seq, needle, counter_).map(lambda node: node.element)


# ============================================================================
# Dispatch on representation
# ============================================================================


def select[T](seq: typing.Any, needle: Needle[T], counter_: CounterLike | None = None) -> Result[T, SelectorError]:
    match seq:
        case RNode():
            return select_r(seq, needle, counter_)
        case LHList():
            return select_l(seq, needle, counter_)
        case _:
            raise TypeError(f"select() expects an HList, got {type(seq).__name__}")


def unwrap_located[N](located: Located[N]) -> N:
    """Raising sugar used by ``get_mut``."""
    match located:
        case Ok(node):
            return node
        case Error(err):
            raise err


def _infer(found: tuple[int, ...], needle: type) -> Result[int, SelectorError]:
    match found:
        case ():
            return Error(ElementNotFoundError(needle, None))
        case (index,):
            _logger.debug("inferred counter %d for %s", index, type_name(needle))
            return Ok(index)
        case _:
            _logger.debug("%s is ambiguous at counters %s", type_name(needle), found)
            return Error(AmbiguousElementError(needle, found))


__all__ = (
    # Left-folded
    "candidates_l",
    "locate_l",
    "select_l",
    # Right-folded
    "candidates_r",
    "locate_r",
    "select_r",
    # Dispatch
    "select",
    "unwrap_located",
)
