"""
Reverse
=======

Разворот порядка внутри одного представления.

Reverse is an involution: applying it twice gives back an equal sequence.
Recursion depth is the length of the sequence, bounded by
``sys.getrecursionlimit()``.
"""

from __future__ import annotations

import typing

from ..core.left import LHList, LNode
from ..core.right import RHList, RNode
from ..core.terminal import Terminal
from .insert import append_r, prepend_l


def reverse_l(seq: LHList) -> LHList:
    """The former last element becomes first: ``prepend_l(reverse_l(prior), last)``."""
    match seq:
        case Terminal():
            return seq
        case LNode(prior, element):
            return prepend_l(reverse_l(prior), element)
        case _:
            raise TypeError(f"reverse_l() expects a left-folded sequence, got {type(seq).__name__}")


def reverse_r(seq: RHList) -> RHList:
    """The former head becomes last: ``append_r(reverse_r(rest), head)``."""
    match seq:
        case Terminal():
            return seq
        case RNode(element, rest):
            return append_r(reverse_r(rest), element)
        case _:
            raise TypeError(f"reverse_r() expects a right-folded sequence, got {type(seq).__name__}")


def reverse(seq: typing.Any) -> typing.Any:
    match seq:
        case Terminal():
            return seq
        case LNode():
            return reverse_l(seq)
        case RNode():
            return reverse_r(seq)
        case _:
            raise TypeError(f"reverse() expects an HList, got {type(seq).__name__}")


__all__ = ("reverse", "reverse_l", "reverse_r")
