"""
Structural operators over left- and right-folded sequences.

Naming:
- ``*_l`` functions take a left-folded sequence
- ``*_r`` functions take a right-folded sequence
- unsuffixed functions dispatch on the representation

These are the raw algebra: they do not track ownership. The ``HList``
methods wrap them with consumption and borrow checks.

Length bound: foreign-end insertion (``prepend_l`` / ``append_r``), ``invert``,
``reverse`` and the counter walk of ``select`` recurse once per element, so
they support sequences up to about ``sys.getrecursionlimit()`` elements
(1000 by default). Iteration, ``map``, ``to_pairs``, ``first`` and ``last``
are iterative and have no such bound.
"""

from .ends import (
    first,
    first_l,
    first_node_l,
    first_node_r,
    first_r,
    last,
    last_l,
    last_node_l,
    last_node_r,
    last_r,
)
from .insert import append, append_l, append_r, prepend, prepend_l, prepend_r
from .invert import invert, invert_l, invert_r
from .reverse import reverse, reverse_l, reverse_r
from .select import (
    candidates_l,
    candidates_r,
    locate_l,
    locate_r,
    select,
    select_l,
    select_r,
    unwrap_located,
)
from .transform import (
    elements,
    elements_l,
    elements_r,
    map_elements,
    map_l,
    map_r,
    shape,
    to_pairs,
)

__all__ = (
    # Insert
    "append",
    "append_l",
    "append_r",
    "prepend",
    "prepend_l",
    "prepend_r",
    # Ends
    "first",
    "first_l",
    "first_node_l",
    "first_node_r",
    "first_r",
    "last",
    "last_l",
    "last_node_l",
    "last_node_r",
    "last_r",
    # Invert
    "invert",
    "invert_l",
    "invert_r",
    # Reverse
    "reverse",
    "reverse_l",
    "reverse_r",
    # Select
    "candidates_l",
    "candidates_r",
    "locate_l",
    "locate_r",
    "select",
    "select_l",
    "select_r",
    "unwrap_located",
    # Transform
    "elements",
    "elements_l",
    "elements_r",
    "map_elements",
    "map_l",
    "map_r",
    "shape",
    "to_pairs",
)
