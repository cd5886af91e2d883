"""
Core type definitions for hlists.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

if typing.TYPE_CHECKING:
    from .counters import Counter

# ============================================================================
# Type aliases
# ============================================================================

# Which end a representation grows at natively
type Side = typing.Literal["left", "right"]

# Needle = exact element type requested from a selector
type Needle[T] = type[T]

# CounterLike = counter object or its plain ordinal
type CounterLike = Counter | int

# Mapper = structural map applied to every element
type Mapper[T, U] = Callable[[T], U]

__all__ = (
    "CounterLike",
    "Mapper",
    "Needle",
    "Side",
)
