"""
First / Last accessors
======================

Доступ к первому и последнему элементу.

The ``*_node_*`` functions return the node holding the element so that a
``Slot`` can write into it; the plain variants return the element itself.
Every accessor raises ``ShapeError`` on Terminal: an empty sequence has no
endpoints.
"""

from __future__ import annotations

import typing

from .._errors import ShapeError
from ..core.left import LHList, LNode
from ..core.right import RHList, RNode
from ..core.terminal import Terminal

# ============================================================================
# Left-folded
# ============================================================================


def first_node_l(seq: LHList) -> LNode[typing.Any, typing.Any]:
    """Oldest node: walk priors until the one wrapping Terminal."""
    if not isinstance(seq, LNode):
        raise ShapeError("first", _shape(seq))
    node: LNode[typing.Any, typing.Any] = seq
    while isinstance(node.prior, LNode):
        node = node.prior
    return node


def last_node_l(seq: LHList) -> LNode[typing.Any, typing.Any]:
    """Newest node is the outermost one; no recursion."""
    match seq:
        case LNode():
            return seq
        case _:
            raise ShapeError("last", _shape(seq))


def first_l(seq: LHList) -> typing.Any:
    return first_node_l(seq).element


def last_l(seq: LHList) -> typing.Any:
    return last_node_l(seq).element


# ============================================================================
# Right-folded
# ============================================================================


def first_node_r(seq: RHList) -> RNode[typing.Any, typing.Any]:
    """Head node is the outermost one; no recursion."""
    match seq:
        case RNode():
            return seq
        case _:
            raise ShapeError("first", _shape(seq))


def last_node_r(seq: RHList) -> RNode[typing.Any, typing.Any]:
    """Tail node: walk rests until the one wrapping Terminal."""
    if not isinstance(seq, RNode):
        raise ShapeError("last", _shape(seq))
    node: RNode[typing.Any, typing.Any] = seq
    while isinstance(node.rest, RNode):
        node = node.rest
    return node


def first_r(seq: RHList) -> typing.Any:
    return first_node_r(seq).element


def last_r(seq: RHList) -> typing.Any:
    return last_node_r(seq).element


# ============================================================================
# Dispatch on representation
# ============================================================================


def first(seq: typing.Any) -> typing.Any:
    match seq:
        case LNode():
            return first_l(seq)
        case RNode():
            return first_r(seq)
        case _:
            raise ShapeError("first", _shape(seq))


def last(seq: typing.Any) -> typing.Any:
    match seq:
        case LNode():
            return last_l(seq)
        case RNode():
            return last_r(seq)
        case _:
            raise ShapeError("last", _shape(seq))


def _shape(seq: object) -> str:
    if isinstance(seq, Terminal):
        return "Terminal"
    return type(seq).__name__


__all__ = (
    # Left-folded
    "first_l",
    "first_node_l",
    "last_l",
    "last_node_l",
    # Right-folded
    "first_r",
    "first_node_r",
    "last_r",
    "last_node_r",
    # Dispatch
    "first",
    "last",
)
