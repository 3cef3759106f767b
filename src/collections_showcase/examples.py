"""Public facade of named collection examples.

This module provides small, stable entry points that each demonstrate one
collection operation on concrete data, suitable for direct assertion in
tests and for printing from the CLI. All logic is delegated to
`collections_showcase.sequences.operations`.

Public Functions:
    map_filter: keep evens then multiply by ten
    reduce_sum / fold_product: reduction without and with a seed
    group_by_parity / associate_by_length: grouping by computed key
    zip_lists, flatten_lists, flat_map_tokens, distinct_sorted
    take_drop, chunked_windowed: slicing helpers
    add_to_list / put_in_map: copy-insert helpers that leave input untouched
"""
from __future__ import annotations

import operator
from typing import Dict, Iterable, List, Mapping, Tuple

from .sequences import operations as ops

__all__ = [
    "map_filter",
    "reduce_sum",
    "fold_product",
    "group_by_parity",
    "associate_by_length",
    "zip_lists",
    "flatten_lists",
    "flat_map_tokens",
    "distinct_sorted",
    "take_drop",
    "chunked_windowed",
    "add_to_list",
    "put_in_map",
]


def map_filter(numbers: Iterable[int]) -> List[int]:
    return ops.filter_then_map(numbers, lambda n: n % 2 == 0, lambda n: n * 10)


def reduce_sum(numbers: Iterable[int]) -> int:
    """Sum without a seed; empty input raises `EmptyInputError`."""
    return ops.reduce_items(numbers, operator.add)


def fold_product(numbers: Iterable[int]) -> int:
    """Product seeded with 1; empty input yields 1."""
    return ops.fold_items(numbers, 1, operator.mul)


def parity(n: int) -> str:
    return "even" if n % 2 == 0 else "odd"


def group_by_parity(numbers: Iterable[int]) -> Dict[str, List[int]]:
    return ops.group_by(numbers, parity)


def associate_by_length(words: Iterable[str]) -> Dict[int, List[str]]:
    return ops.group_by(words, len)


def zip_lists(a: Iterable[int], b: Iterable[str]) -> List[str]:
    return ops.zip_with(a, b, lambda x, y: f"{x}-{y}")


def flatten_lists(matrix: Iterable[Iterable[int]]) -> List[int]:
    return ops.flatten(matrix)


def flat_map_tokens(lines: Iterable[str]) -> List[str]:
    return ops.flat_map_tokens(lines)


def distinct_sorted(numbers: Iterable[int]) -> List[int]:
    return ops.distinct_sorted(numbers)


def take_drop(numbers: Iterable[int], n: int = 3) -> Tuple[List[int], List[int]]:
    """Split at `n`: (first n, rest)."""
    materialized = list(numbers)
    return ops.take(materialized, n), ops.drop(materialized, n)


def chunked_windowed(
    numbers: Iterable[int],
    *,
    chunk_size: int = 3,
    window_size: int = 3,
    window_step: int = 2,
    allow_partial: bool = False,
) -> Tuple[List[List[int]], List[List[int]]]:
    """Chunk and window the same input.

    With the defaults, ``[1..7]`` gives chunks ``[[1,2,3],[4,5,6],[7]]`` and
    windows ``[[1,2,3],[3,4,5],[5,6,7]]``.
    """
    materialized = list(numbers)
    return (
        ops.chunk(materialized, chunk_size),
        ops.window(materialized, window_size, step=window_step, allow_partial=allow_partial),
    )


def add_to_list(items: Iterable[int], value: int) -> List[int]:
    return ops.copy_insert_into_sequence(items, value)


def put_in_map(mapping: Mapping[str, int], key: str, value: int) -> Dict[str, int]:
    return ops.copy_insert_into_mapping(mapping, key, value)
