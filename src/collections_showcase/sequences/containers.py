"""Immutable vs mutable containers, arrays, ranges and tuples.

Each constructor returns a fresh value so callers may mutate the "mutable"
flavours freely. The immutable flavours use the read-only builtin types:

    list  -> tuple
    set   -> frozenset
    dict  -> types.MappingProxyType over a private dict
"""
from __future__ import annotations

from array import array
from types import MappingProxyType
from typing import Dict, List, Mapping, Set, Tuple

from ..errors import InvalidArgumentError

__all__ = [
    "immutable_list",
    "mutable_list",
    "immutable_set",
    "mutable_set",
    "immutable_map",
    "mutable_map",
    "int_array",
    "generic_array",
    "closed_range",
    "char_range",
    "int_range_inclusive",
    "int_range_exclusive",
    "int_range_step",
    "pair_and_triple",
]


def immutable_list() -> Tuple[int, ...]:
    return (1, 2, 3)


def mutable_list() -> List[int]:
    return [1, 2, 3]


def immutable_set() -> frozenset[str]:
    # Built from a sequence with a repeat; the repeat is dropped.
    return frozenset(["a", "b", "a"])


def mutable_set() -> Set[str]:
    return {"a", "b"}


def immutable_map() -> Mapping[str, int]:
    return MappingProxyType({"one": 1, "two": 2})


def mutable_map() -> Dict[str, int]:
    return {"one": 1, "two": 2}


def int_array() -> array:
    """Typed, compact array of C ints."""
    return array("i", [1, 2, 3])


def generic_array() -> List[str]:
    return ["x", "y"]


def closed_range(start: int, end: int, step: int = 1) -> range:
    """Range including both ends, e.g. ``closed_range(0, 10, 2)`` -> 0, 2, ..., 10.

    Raises:
        InvalidArgumentError: `step` < 1.
    """
    if step < 1:
        raise InvalidArgumentError(f"range step must be >= 1 (got {step})")
    return range(start, end + 1, step)


def char_range(first: str, last: str) -> List[str]:
    """All characters from `first` to `last` inclusive, by code point."""
    if len(first) != 1 or len(last) != 1:
        raise InvalidArgumentError("char_range bounds must be single characters")
    return [chr(code) for code in range(ord(first), ord(last) + 1)]


def int_range_inclusive() -> range:
    return closed_range(1, 5)


def int_range_exclusive() -> range:
    return range(1, 5)


def int_range_step() -> range:
    return closed_range(0, 10, step=2)


def pair_and_triple() -> Tuple[Tuple[int, str], Tuple[int, int, int]]:
    return (1, "one"), (1, 2, 3)
