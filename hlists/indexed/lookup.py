"""
Tag lookup
==========

Поиск по тегу поверх тегированных последовательностей.

Insertion never checks tags for uniqueness. This layer does, when a value is
looked up by tag:

- ``TagPolicy(on_collision="reject")`` (default): two or more elements with
  the requested tag is a ``TagCollisionError``
- ``TagPolicy(on_collision="last")``: the logically last one wins

An untagged sequence is reported as ``Error(UntaggedElementError)`` by the
Result-returning functions and raised by ``get_tagged``.
"""

from __future__ import annotations

import logging
import typing
from collections import Counter as Tally
from dataclasses import dataclass
from typing import Final, Literal

from kungfu import Error, Ok, Result

from .._errors import TagCollisionError, TagError, TagNotFoundError, UntaggedElementError
from ..ops.transform import elements
from .tagged import Indexed, is_indexed, tags

_logger: Final[logging.Logger] = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TagPolicy:
    """What a tag lookup does when several elements share the tag."""

    on_collision: Literal["reject", "last"] = "reject"

    def __post_init__(self) -> None:
        if self.on_collision not in ("reject", "last"):
            raise ValueError("TagPolicy.on_collision must be 'reject' or 'last'")


def find_tagged(
    seq: typing.Any,
    tag: int,
    *,
    policy: TagPolicy = TagPolicy(),
) -> Result[typing.Any, TagError]:
    """Value carried by the element tagged ``tag``."""
    if not is_indexed(seq):
        return Error(UntaggedElementError("find_tagged"))
    matches: list[Indexed[typing.Any]] = [
        element for element in elements(seq) if element.tag == tag
    ]
    match matches:
        case []:
            return Error(TagNotFoundError(tag))
        case [only]:
            return Ok(only.value)
        case [*_, winner] if policy.on_collision == "last":
            _logger.debug("tag %d carried by %d elements, taking the last", tag, len(matches))
            return Ok(winner.value)
        case _:
            return Error(TagCollisionError(tag, len(matches)))


def get_tagged(
    seq: typing.Any,
    tag: int,
    *,
    policy: TagPolicy = TagPolicy(),
) -> typing.Any:
    match find_tagged(seq, tag, policy=policy):
        case Ok(value):
            return value
        case Error(err):
            raise err


def check_unique_tags[S](seq: S) -> Result[S, TagError]:
    """``Ok(seq)`` when no tag is carried twice, else the first collision found."""
    if not is_indexed(seq):
        return Error(UntaggedElementError("check_unique_tags"))
    for tag, count in Tally(tags(seq)).items():
        if count > 1:
            return Error(TagCollisionError(tag, count))
    return Ok(seq)


__all__ = (
    "TagPolicy",
    "check_unique_tags",
    "find_tagged",
    "get_tagged",
)
