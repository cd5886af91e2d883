"""
Transform & export
==================

Structural map, logical-order iteration and export to nested pairs.
Everything here walks the nodes in a loop, so length is unbounded.
"""

from __future__ import annotations

import typing
from collections.abc import Iterator

from .._helpers import nest_left, nest_right, type_name
from .._types import Mapper
from ..core.left import LHList, LNode
from ..core.right import RHList, RNode
from ..core.terminal import NIL

# ============================================================================
# Iteration
# ============================================================================


def elements_l(seq: LHList) -> Iterator[typing.Any]:
    """First to last. The outermost LNode holds the last element."""
    stack: list[typing.Any] = []
    node: LHList = seq
    while isinstance(node, LNode):
        stack.append(node.element)
        node = node.prior
    return reversed(stack)


def elements_r(seq: RHList) -> Iterator[typing.Any]:
    node: RHList = seq
    while isinstance(node, RNode):
        yield node.element
        node = node.rest


def elements(seq: typing.Any) -> Iterator[typing.Any]:
    match seq:
        case RNode():
            return elements_r(seq)
        case LHList():
            return elements_l(seq)
        case _:
            raise TypeError(f"elements() expects an HList, got {type(seq).__name__}")


# ============================================================================
# Structural map
# ============================================================================


def map_l(seq: LHList, f: Mapper[typing.Any, typing.Any]) -> LHList:
    """Apply ``f`` to every element, first to last, keeping the nesting."""
    if not isinstance(seq, LHList):
        raise TypeError(f"map_l() expects a left-folded sequence, got {type(seq).__name__}")
    mapped: LHList = NIL
    for element in elements_l(seq):
        mapped = LNode(mapped, f(element))
    return mapped


def map_r(seq: RHList, f: Mapper[typing.Any, typing.Any]) -> RHList:
    if not isinstance(seq, RHList):
        raise TypeError(f"map_r() expects a right-folded sequence, got {type(seq).__name__}")
    heads = [f(element) for element in elements_r(seq)]
    mapped: RHList = NIL
    for head in reversed(heads):
        mapped = RNode(head, mapped)
    return mapped


def map_elements(seq: typing.Any, f: Mapper[typing.Any, typing.Any]) -> typing.Any:
    match seq:
        case RNode():
            return map_r(seq, f)
        case LHList():
            return map_l(seq, f)
        case _:
            raise TypeError(f"map_elements() expects an HList, got {type(seq).__name__}")


# ============================================================================
# Export
# ============================================================================


def to_pairs(seq: typing.Any) -> tuple[typing.Any, ...]:
    """
    Nested pair encoding, ``()`` for Terminal.

    Built bottom-up without recursion, so any length is exported.

    Example:
        to_pairs(NIL.append(1).append(2))    # (((), 1), 2)
        to_pairs(NIL.prepend(2).prepend(1))  # (1, (2, ()))
    """
    pairs: tuple[typing.Any, ...] = ()
    match seq:
        case RNode():
            for element in reversed(tuple(elements_r(seq))):
                pairs = (element, pairs)
        case LHList():
            for element in elements_l(seq):
                pairs = (pairs, element)
        case _:
            raise TypeError(f"to_pairs() expects an HList, got {type(seq).__name__}")
    return pairs


def shape(seq: typing.Any) -> str:
    """Nested type signature, e.g. ``((((), int), str), float)``."""
    names = (type_name(type(element)) for element in elements(seq))
    match seq:
        case RNode():
            return nest_right(names)
        case _:
            return nest_left(names)


__all__ = (
    # Iteration
    "elements",
    "elements_l",
    "elements_r",
    # Structural map
    "map_elements",
    "map_l",
    "map_r",
    # Export
    "shape",
    "to_pairs",
)
