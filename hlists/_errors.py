from __future__ import annotations

from ._helpers import type_name


class HListError(Exception):
    """Base class for every rejection raised by hlists."""


class ShapeError(HListError):
    """Operation has no case for the shape of the sequence it was applied to."""

    operation: str
    shape: str

    def __init__(self, operation: str, shape: str) -> None:
        self.operation = operation
        self.shape = shape
        super().__init__(f"{operation}() is not defined for {shape}")


# ============================================================================
# Selector
# ============================================================================


class SelectorError(HListError):
    """Needle + counter does not resolve to exactly one position."""

    needle: type
    counter: int | None

    def __init__(self, needle: type, counter: int | None, message: str) -> None:
        self.needle = needle
        self.counter = counter
        super().__init__(message)


class ElementNotFoundError(SelectorError):
    def __init__(self, needle: type, counter: int | None, detail: str = "") -> None:
        where = "anywhere" if counter is None else f"at counter {counter}"
        message = f"no element of type {type_name(needle)} {where}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(needle, counter, message)


class AmbiguousElementError(SelectorError):
    """Needle occurs more than once and no counter was given."""

    candidates: tuple[int, ...]

    def __init__(self, needle: type, candidates: tuple[int, ...]) -> None:
        self.candidates = candidates
        super().__init__(
            needle,
            None,
            f"type {type_name(needle)} occurs at counters {list(candidates)}; pass a counter",
        )


class ElementTypeError(HListError, TypeError):
    """A write would change the type of an element."""

    expected: type
    actual: type

    def __init__(self, expected: type, actual: type) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"slot holds {type_name(expected)}, cannot store {type_name(actual)}"
        )


# ============================================================================
# Ownership
# ============================================================================


class OwnershipError(HListError):
    """Sequence was used against its ownership contract."""


class ConsumedError(OwnershipError):
    operation: str
    consumed_by: str

    def __init__(self, operation: str, consumed_by: str) -> None:
        self.operation = operation
        self.consumed_by = consumed_by
        super().__init__(
            f"{operation}() on a sequence already consumed by {consumed_by}()"
        )


class BorrowError(OwnershipError):
    operation: str

    def __init__(self, operation: str, message: str | None = None) -> None:
        self.operation = operation
        super().__init__(message or f"{operation}() while the sequence is mutably borrowed")


# ============================================================================
# Tags
# ============================================================================


class TagError(HListError):
    """Base class for tagged-sequence rejections."""


class UntaggedElementError(TagError):
    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() requires every element to be Indexed")


class InvalidTagError(TagError):
    tag: object

    def __init__(self, tag: object, reason: str) -> None:
        self.tag = tag
        super().__init__(f"invalid tag {tag!r}: {reason}")


class TagNotFoundError(TagError):
    tag: int

    def __init__(self, tag: int) -> None:
        self.tag = tag
        super().__init__(f"no element tagged {tag}")


class TagCollisionError(TagError):
    tag: int
    count: int

    def __init__(self, tag: int, count: int) -> None:
        self.tag = tag
        self.count = count
        super().__init__(f"tag {tag} is carried by {count} elements")


__all__ = (
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
