"""Generic container and runtime type helpers."""
from __future__ import annotations

from typing import Any, Generic, List, Sequence, TypeVar

from ..errors import InvalidArgumentError

T = TypeVar("T")

__all__ = ["Box", "swapped", "is_of_type", "type_name"]


class Box(Generic[T]):
    """Holds one item of a fixed type."""

    def __init__(self, item: T):
        self._item = item

    def get(self) -> T:
        return self._item

    def set(self, item: T) -> None:
        self._item = item

    def __repr__(self) -> str:
        return f"Box({self._item!r})"


def swapped(items: Sequence[T], i: int, j: int) -> List[T]:
    """Return a copy of `items` with positions `i` and `j` exchanged."""
    if not (-len(items) <= i < len(items) and -len(items) <= j < len(items)):
        raise InvalidArgumentError(f"swap indices {i}, {j} out of range for length {len(items)}")
    result = list(items)
    result[i], result[j] = result[j], result[i]
    return result


def is_of_type(value: Any, tp: type) -> bool:
    return isinstance(value, tp)


def type_name(tp: type) -> str:
    return getattr(tp, "__name__", None) or "Unknown"
