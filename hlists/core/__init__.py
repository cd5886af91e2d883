from .hlist import HList
from .left import LHList, LNode
from .ownership import Ownership, Slot
from .right import RHList, RNode
from .terminal import NIL, Terminal

__all__ = (
    # Interface
    "HList",
    # Left-folded
    "LHList",
    "LNode",
    # Right-folded
    "RHList",
    "RNode",
    # Terminal
    "NIL",
    "Terminal",
    # Ownership
    "Ownership",
    "Slot",
)
