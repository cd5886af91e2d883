"""
Invert
======

Изоморфизм LFS <-> RFS с сохранением порядка.

    invert_l(NIL.append(1).append(2))     # RNode(1, RNode(2, NIL))
    invert_r(NIL.prepend(2).prepend(1))   # LNode(LNode(NIL, 1), 2)

Inverting twice gives back a sequence equal to the original. Recursion depth
is the length of the sequence, bounded by ``sys.getrecursionlimit()``.
"""

from __future__ import annotations

import typing

from ..core.left import LHList, LNode
from ..core.right import RHList, RNode
from ..core.terminal import Terminal
from .insert import append_r, prepend_l


def invert_l(seq: LHList) -> RHList:
    """
    LFS → RFS.

    Base case: Terminal → Terminal.
    Inductive step: invert the prior, then append the last element at the
    tail of the resulting RFS.
    """
    match seq:
        case Terminal():
            return seq
        case LNode(prior, element):
            return append_r(invert_l(prior), element)
        case _:
            raise TypeError(f"invert_l() expects a left-folded sequence, got {type(seq).__name__}")


def invert_r(seq: RHList) -> LHList:
    """
    RFS → LFS.

    Base case: Terminal → Terminal.
    Inductive step: invert the rest, then prepend the head element at the
    front of the resulting LFS.
    """
    match seq:
        case Terminal():
            return seq
        case RNode(element, rest):
            return prepend_l(invert_r(rest), element)
        case _:
            raise TypeError(f"invert_r() expects a right-folded sequence, got {type(seq).__name__}")


def invert(seq: typing.Any) -> typing.Any:
    match seq:
        case Terminal():
            return seq
        case LNode():
            return invert_l(seq)
        case RNode():
            return invert_r(seq)
        case _:
            raise TypeError(f"invert() expects an HList, got {type(seq).__name__}")


__all__ = ("invert", "invert_l", "invert_r")
