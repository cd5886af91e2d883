"""
Tagged sequences
================

Элементы с явными целочисленными тегами.

A tagged sequence is an ordinary LFS or RFS whose every element is wrapped
in ``Indexed(tag, value)``. Tags are chosen by the caller and are
independent of position:

    seq = NIL.append_indexed(1.0).append_indexed("x", tag=1)
    seq.tags()         # (0, 1)
    seq.unindexed()    # LHList[1.0, 'x']

Rules:
- the first tagged element placed into Terminal carries tag 0
- ``tag=None`` on a non-empty sequence means ``max(tags) + 1``
- explicit tags are not checked for uniqueness here; see ``lookup``
"""

from __future__ import annotations

import itertools
import typing
from dataclasses import dataclass

from .._errors import InvalidTagError, UntaggedElementError
from ..core.left import LHList
from ..core.right import RHList
from ..core.terminal import Terminal
from ..ops.insert import append_l, append_r, prepend_l, prepend_r
from ..ops.transform import elements, map_elements

ROOT_TAG: typing.Final[int] = 0


@dataclass(frozen=True, slots=True)
class Indexed[E]:
    """Tag carrier: ``value`` labelled with a non-negative integer ``tag``."""

    tag: int
    value: E

    def __post_init__(self) -> None:
        _check_tag(self.tag)

    def __repr__(self) -> str:
        return f"Indexed[{self.tag}]({self.value!r})"


def _check_tag(tag: object) -> int:
    if isinstance(tag, bool) or not isinstance(tag, int):
        raise InvalidTagError(tag, "tags are integers")
    if tag < 0:
        raise InvalidTagError(tag, "tags are non-negative")
    return tag


# ============================================================================
# Inspection
# ============================================================================


def is_indexed(seq: typing.Any) -> bool:
    """True when every element carries a tag (vacuously true for Terminal)."""
    return all(isinstance(element, Indexed) for element in elements(seq))


def tags(seq: typing.Any) -> tuple[int, ...]:
    """Tags in logical order."""
    if not is_indexed(seq):
        raise UntaggedElementError("tags")
    return tuple(element.tag for element in elements(seq))


def _resolve_tag(seq: typing.Any, tag: int | None, operation: str) -> int:
    if not is_indexed(seq):
        raise UntaggedElementError(operation)
    if tag is not None:
        _check_tag(tag)
    if isinstance(seq, Terminal):
        if tag is None or tag == ROOT_TAG:
            return ROOT_TAG
        raise InvalidTagError(tag, f"the first tagged element carries tag {ROOT_TAG}")
    if tag is None:
        return max(tags(seq)) + 1
    return tag


# ============================================================================
# Insertion
# ============================================================================


def append_indexed_l[E](seq: LHList, value: E, *, tag: int | None = None) -> LHList:
    return append_l(seq, Indexed(_resolve_tag(seq, tag, "append_indexed"), value))


def prepend_indexed_l[E](seq: LHList, value: E, *, tag: int | None = None) -> LHList:
    return prepend_l(seq, Indexed(_resolve_tag(seq, tag, "prepend_indexed"), value))


def prepend_indexed_r[E](seq: RHList, value: E, *, tag: int | None = None) -> RHList:
    return prepend_r(seq, Indexed(_resolve_tag(seq, tag, "prepend_indexed"), value))


def append_indexed_r[E](seq: RHList, value: E, *, tag: int | None = None) -> RHList:
    return append_r(seq, Indexed(_resolve_tag(seq, tag, "append_indexed"), value))


# ============================================================================
# Projection
# ============================================================================


def unindexed(seq: typing.Any) -> typing.Any:
    """
    Strip the tag carrier.

    Pure structural map: same representation, same order, same values.
    """
    if not is_indexed(seq):
        raise UntaggedElementError("unindexed")
    return map_elements(seq, lambda element: element.value)


def enumerate_tags(seq: typing.Any) -> typing.Any:
    """Tag an ordinary sequence positionally, 0..n-1 in logical order."""
    positions = itertools.count(ROOT_TAG)
    return map_elements(seq, lambda element: Indexed(next(positions), element))


__all__ = (
    "ROOT_TAG",
    "Indexed",
    "append_indexed_l",
    "append_indexed_r",
    "enumerate_tags",
    "is_indexed",
    "prepend_indexed_l",
    "prepend_indexed_r",
    "tags",
    "unindexed",
)
