"""Shared fixtures and builders for hlists tests."""

from collections.abc import Callable
from typing import Any

import pytest

from hlists import NIL, HList, LHList, RHList


def build_left(*items: Any) -> LHList:
    """Left-folded sequence holding ``items`` in logical order."""
    seq: LHList = NIL
    for item in items:
        seq = seq.append(item)
    return seq


def build_right(*items: Any) -> RHList:
    """Right-folded sequence holding ``items`` in logical order."""
    seq: RHList = NIL
    for item in reversed(items):
        seq = seq.prepend(item)
    return seq


@pytest.fixture
def left_seq() -> LHList:
    return build_left(1, "two", 3.0)


@pytest.fixture
def right_seq() -> RHList:
    return build_right(1, "two", 3.0)


@pytest.fixture
def make_left() -> Callable[..., LHList]:
    return build_left


@pytest.fixture
def make_right() -> Callable[..., RHList]:
    return build_right


@pytest.fixture(params=["left", "right"])
def builder(request: pytest.FixtureRequest) -> Callable[..., HList]:
    """Both representations, so facade tests run once per side."""
    return build_left if request.param == "left" else build_right
