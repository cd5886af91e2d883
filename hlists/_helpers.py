"""Internal helpers for hlists.

Small functions shared by the core classes and the ops modules.
Not part of the public API."""

from __future__ import annotations

from collections.abc import Iterable


def type_name(tp: type) -> str:
    """Short, readable name of a type (builtins without module prefix)."""
    module = getattr(tp, "__module__", "builtins")
    qualname = getattr(tp, "__qualname__", repr(tp))
    if module == "builtins":
        return qualname
    return f"{module}.{qualname}"


def same_element(a: object, b: object) -> bool:
    """
    Exact-type equality.

    The type of an element is part of a sequence's identity, so 1 and 1.0
    (or 1 and True) are different elements even though they compare equal.
    """
    return type(a) is type(b) and a == b


def format_elements(items: Iterable[object]) -> str:
    return ", ".join(repr(item) for item in items)


def nest_left(names: Iterable[str]) -> str:
    """Left-folded textual shape: ``((((), a), b), c)``."""
    shape = "()"
    for name in names:
        shape = f"({shape}, {name})"
    return shape


def nest_right(names: Iterable[str]) -> str:
    """Right-folded textual shape: ``(a, (b, (c, ())))``."""
    shape = "()"
    for name in reversed(tuple(names)):
        shape = f"({name}, {shape})"
    return shape


__all__ = (
    "format_elements",
    "nest_left",
    "nest_right",
    "same_element",
    "type_name",
)
