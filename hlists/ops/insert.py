"""
Insert operators
================

Вставка в начало и в конец для обоих представлений.

Each representation has a native end (O(1), wraps the receiver) and a
foreign end (structural recursion through every layer):

- LFS append, native:  ``LNode(seq, e)``
- LFS prepend, foreign: pushed down to the oldest layer and rebuilt
- RFS prepend, native:  ``RNode(e, seq)``
- RFS append, foreign: pushed down to the tail and rebuilt

The foreign end recurses once per element: lengths up to about
``sys.getrecursionlimit()`` are supported.

These functions do not track ownership; the ``HList`` methods do.
"""

from __future__ import annotations

import typing

from ..core.left import LHList, LNode
from ..core.right import RHList, RNode
from ..core.terminal import Terminal

# ============================================================================
# Left-folded
# ============================================================================


def append_l[E](seq: LHList, element: E) -> LNode[LHList, E]:
    """Native LFS growth: the receiver becomes the prior of a new node."""
    return LNode(seq, element)


def prepend_l[E](seq: LHList, element: E) -> LHList:
    """
    Insert at the head of an LFS.

    Base case: ``Terminal`` → ``(Terminal, e)``.
    Inductive step: ``(prior, x)`` → ``(prepend_l(prior, e), x)``.
    """
    match seq:
        case Terminal():
            return LNode(seq, element)
        case LNode(prior, last):
            return LNode(prepend_l(prior, element), last)
        case _:
            raise TypeError(f"prepend_l() expects a left-folded sequence, got {type(seq).__name__}")


# ============================================================================
# Right-folded
# ============================================================================


def prepend_r[E](seq: RHList, element: E) -> RNode[E, RHList]:
    """Native RFS growth: the receiver becomes the rest of a new node."""
    return RNode(element, seq)


def append_r[E](seq: RHList, element: E) -> RHList:
    """
    Insert at the tail of an RFS.

    Base case: ``Terminal`` → ``(e, Terminal)``.
    Inductive step: ``(x, rest)`` → ``(x, append_r(rest, e))``.
    """
    match seq:
        case Terminal():
            return RNode(element, seq)
        case RNode(head, rest):
            return RNode(head, append_r(rest, element))
        case _:
            raise TypeError(f"append_r() expects a right-folded sequence, got {type(seq).__name__}")


# ============================================================================
# Dispatch on representation
# ============================================================================


def append(seq: typing.Any, element: typing.Any) -> typing.Any:
    """Append to either representation; Terminal starts a left-folded sequence."""
    match seq:
        case RNode():
            return append_r(seq, element)
        case LHList():
            return append_l(seq, element)
        case _:
            raise TypeError(f"append() expects an HList, got {type(seq).__name__}")


def prepend(seq: typing.Any, element: typing.Any) -> typing.Any:
    """Prepend to either representation; Terminal starts a right-folded sequence."""
    match seq:
        case LNode():
            return prepend_l(seq, element)
        case RHList():
            return prepend_r(seq, element)
        case _:
            raise TypeError(f"prepend() expects an HList, got {type(seq).__name__}")


__all__ = (
    # Left-folded
    "append_l",
    "prepend_l",
    # Right-folded
    "append_r",
    "prepend_r",
    # Dispatch
    "append",
    "prepend",
)
