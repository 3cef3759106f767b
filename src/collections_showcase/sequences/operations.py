"""Pure transformations over ordered sequences, sets and mappings.

Every function here is referentially transparent: identical input yields
identical output, nothing is mutated, and no state survives between calls.
Inputs may be any iterable unless noted; results are fresh ``list`` or
``dict`` values owned by the caller.

Ordering rules:
    - Filtering, mapping, flattening and zipping preserve input order.
    - ``group_by`` orders keys by first occurrence and keeps original order
      inside each group.
    - ``distinct`` keeps first-seen order; ``distinct_sorted`` sorts after.

Failure modes:
    - ``reduce_items`` on empty input raises ``EmptyInputError``.
    - ``chunk``/``window`` with size (or step) < 1 raise ``InvalidArgumentError``.
    - ``take``/``drop`` with negative ``n`` are not validated.
"""
from __future__ import annotations

import logging
import re
from itertools import islice
from typing import (
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Mapping,
    Sequence,
    Tuple,
    TypeVar,
)

from ..errors import EmptyInputError, InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
K = TypeVar("K")
V = TypeVar("V")
H = TypeVar("H", bound=Hashable)

_WHITESPACE_RE = re.compile(r"\s+")

__all__ = [
    "map_then_filter",
    "filter_then_map",
    "reduce_items",
    "fold_items",
    "group_by",
    "partition",
    "zip_with",
    "flatten",
    "flat_map",
    "flat_map_tokens",
    "distinct",
    "distinct_sorted",
    "take",
    "drop",
    "chunk",
    "window",
    "copy_insert_into_sequence",
    "copy_insert_into_mapping",
    "second",
    "penultimate",
]


def map_then_filter(
    items: Iterable[T], transform: Callable[[T], U], predicate: Callable[[U], bool]
) -> List[U]:
    """Transform every element, then keep the transformed values matching `predicate`."""
    return [value for value in (transform(item) for item in items) if predicate(value)]


def filter_then_map(
    items: Iterable[T], predicate: Callable[[T], bool], transform: Callable[[T], U]
) -> List[U]:
    """Keep elements matching `predicate`, then transform the survivors."""
    return [transform(item) for item in items if predicate(item)]


def reduce_items(items: Iterable[T], op: Callable[[T, T], T]) -> T:
    """Combine all elements left-to-right with `op`, starting from the first.

    Raises:
        EmptyInputError: `items` has no elements; there is no identity to
            fall back on.
    """
    iterator = iter(items)
    try:
        acc = next(iterator)
    except StopIteration:
        raise EmptyInputError("cannot reduce an empty sequence without a seed") from None
    for item in iterator:
        acc = op(acc, item)
    return acc


def fold_items(items: Iterable[T], seed: R, op: Callable[[R, T], R]) -> R:
    """Combine all elements left-to-right with `op`, starting from `seed`.

    Empty input is valid and returns `seed` unchanged.
    """
    acc = seed
    for item in items:
        acc = op(acc, item)
    return acc


def group_by(items: Iterable[T], key_fn: Callable[[T], K]) -> Dict[K, List[T]]:
    """Partition `items` into key -> elements sharing that key.

    Keys appear in order of first occurrence; elements keep their original
    relative order inside each group. Every element lands in exactly one group.
    """
    groups: Dict[K, List[T]] = {}
    for item in items:
        groups.setdefault(key_fn(item), []).append(item)
    return groups


def partition(items: Iterable[T], predicate: Callable[[T], bool]) -> Tuple[List[T], List[T]]:
    """Split into (matching, not matching), both in original order."""
    matching: List[T] = []
    rest: List[T] = []
    for item in items:
        (matching if predicate(item) else rest).append(item)
    return matching, rest


def zip_with(
    seq_a: Iterable[T], seq_b: Iterable[U], combine: Callable[[T, U], R]
) -> List[R]:
    """Pair elements positionally and combine each pair.

    The result is as long as the shorter input; surplus elements of the
    longer input are dropped.
    """
    return [combine(a, b) for a, b in zip(seq_a, seq_b)]


def flatten(nested: Iterable[Iterable[T]]) -> List[T]:
    """Concatenate inner sequences, preserving outer and inner order."""
    return [item for inner in nested for item in inner]


def flat_map(items: Iterable[T], expand: Callable[[T], Iterable[U]]) -> List[U]:
    """Expand every element into zero or more values and concatenate them."""
    return [value for item in items for value in expand(item)]


def flat_map_tokens(lines: Iterable[str]) -> List[str]:
    """Split each line on whitespace runs and drop blank tokens.

    Consecutive whitespace collapses; leading/trailing whitespace never
    yields an empty token.
    """
    return [token for token in flat_map(lines, _WHITESPACE_RE.split) if token.strip()]


def distinct(items: Iterable[H]) -> List[H]:
    """Drop repeated values, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def distinct_sorted(items: Iterable[H]) -> List[H]:
    """Unique values in ascending order."""
    return sorted(dict.fromkeys(items))


def take(items: Iterable[T], n: int) -> List[T]:
    """Return the first `n` elements (all of them if fewer than `n`)."""
    return list(islice(items, n))


def drop(items: Iterable[T], n: int) -> List[T]:
    """Return everything after the first `n` elements (empty if fewer)."""
    return list(islice(items, n, None))


def chunk(items: Iterable[T], size: int) -> List[List[T]]:
    """Split into consecutive groups of `size`; the last group may be shorter.

    Raises:
        InvalidArgumentError: `size` < 1.
    """
    if size < 1:
        raise InvalidArgumentError(f"chunk size must be >= 1 (got {size})")
    iterator = iter(items)
    chunks: List[List[T]] = []
    while True:
        group = list(islice(iterator, size))
        if not group:
            return chunks
        chunks.append(group)


def window(
    items: Sequence[T] | Iterable[T],
    size: int,
    step: int = 1,
    allow_partial: bool = False,
) -> List[List[T]]:
    """Produce sub-sequences of length `size` whose starts advance by `step`.

    Windows start at indices 0, step, 2*step, ... Without `allow_partial`
    the output stops at the last window that fits entirely; with it,
    trailing windows are clipped at the end of the input instead of dropped.

    Raises:
        InvalidArgumentError: `size` < 1 or `step` < 1.
    """
    if size < 1:
        raise InvalidArgumentError(f"window size must be >= 1 (got {size})")
    if step < 1:
        raise InvalidArgumentError(f"window step must be >= 1 (got {step})")
    seq = items if isinstance(items, Sequence) else list(items)
    length = len(seq)
    windows: List[List[T]] = []
    for start in range(0, length, step):
        end = start + size
        if end > length and not allow_partial:
            logger.debug(
                "window: dropping partial window start=%d size=%d length=%d", start, size, length
            )
            break
        windows.append(list(seq[start:end]))
    return windows


def copy_insert_into_sequence(items: Iterable[T], value: T) -> List[T]:
    """Return a new list equal to `items` plus `value`; `items` is untouched."""
    copied = list(items)
    copied.append(value)
    return copied


def copy_insert_into_mapping(mapping: Mapping[K, V], key: K, value: V) -> Dict[K, V]:
    """Return a new dict equal to `mapping` with `key` set to `value`.

    An existing key keeps its position and takes the new value.
    """
    copied = dict(mapping)
    copied[key] = value
    return copied


def second(items: Sequence[T]) -> T:
    if len(items) < 2:
        raise InvalidArgumentError(f"second() needs at least 2 elements (got {len(items)})")
    return items[1]


def penultimate(items: Sequence[T]) -> T:
    if len(items) < 2:
        raise InvalidArgumentError(f"penultimate() needs at least 2 elements (got {len(items)})")
    return items[-2]
