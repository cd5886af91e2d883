"""
Heterogeneous sequences with a structural algebra.

Two dual representations of the same ordered, heterogeneous sequence:

- left-folded (``LHList``): ``LNode(prior, element)``, grows at the tail
- right-folded (``RHList``): ``RNode(element, rest)``, grows at the head

Both share the empty value ``NIL`` and the ``HList`` interface. Every
operation is defined by structural induction (Terminal / Node) and every
ill-formed use is rejected with a typed ``HListError``.

Architecture:
- ``ops``: the raw algebra as functions (``*_l`` / ``*_r`` / dispatching)
- ``core``: node classes; methods add ownership checks on top of ``ops``
- ``indexed``: tagged-element variant and tag lookup

Example:
    seq = NIL.append(1).append("two").append(3.0)
    seq.length          # 3
    seq.get(str)        # "two"
    seq.invert()        # RHList[1, 'two', 3.0]
"""

# Core types
from ._types import CounterLike, Mapper, Needle, Side

# Counters
from .counters import ZERO, Counter, Successor, Zero, as_counter, counter

# Sequences
from .core import NIL, HList, LHList, LNode, Ownership, RHList, RNode, Slot, Terminal

# Raw algebra (namespace import - preferred)
from . import ops

# Tagged variant
from . import indexed
from .indexed import (
    ROOT_TAG,
    Indexed,
    TagPolicy,
    check_unique_tags,
    enumerate_tags,
    find_tagged,
    get_tagged,
    is_indexed,
    tags,
    unindexed,
)

# Errors
from ._errors import (
    AmbiguousElementError,
    BorrowError,
    ConsumedError,
    ElementNotFoundError,
    ElementTypeError,
    HListError,
    InvalidTagError,
    OwnershipError,
    SelectorError,
    ShapeError,
    TagCollisionError,
    TagError,
    TagNotFoundError,
    UntaggedElementError,
)

__all__ = (
    # Types
    "CounterLike",
    "Mapper",
    "Needle",
    "Side",
    # Counters
    "ZERO",
    "Counter",
    "Successor",
    "Zero",
    "as_counter",
    "counter",
    # Sequences
    "NIL",
    "HList",
    "LHList",
    "LNode",
    "RHList",
    "RNode",
    "Terminal",
    # Ownership
    "Ownership",
    "Slot",
    # Ops module
    "ops",
    # Tagged
    "indexed",
    "ROOT_TAG",
    "Indexed",
    "TagPolicy",
    "check_unique_tags",
    "enumerate_tags",
    "find_tagged",
    "get_tagged",
    "is_indexed",
    "tags",
    "unindexed",
    # Errors
    "AmbiguousElementError",
    "BorrowError",
    "ConsumedError",
    "ElementNotFoundError",
    "ElementTypeError",
    "HListError",
    "InvalidTagError",
    "OwnershipError",
    "SelectorError",
    "ShapeError",
    "TagCollisionError",
    "TagError",
    "TagNotFoundError",
    "UntaggedElementError",
)
