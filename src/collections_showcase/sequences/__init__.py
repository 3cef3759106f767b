"""Sequence transformation library.

Modules:
    operations: eager, pure transformations (map/filter, reduce/fold,
        group_by, zip_with, flatten, distinct, take/drop, chunk, window,
        copy-insert helpers)
    lazy: deferred single-pass pipelines with results identical to the
        eager operations
    containers: immutable vs mutable container constructors, ranges, tuples

Design Invariants:
    - No function mutates its input or keeps state between calls
    - Output order is fully determined by input order
    - Misuse raises EmptyInputError / InvalidArgumentError synchronously
"""
from __future__ import annotations

from . import containers as containers  # noqa: F401
from . import lazy as lazy  # noqa: F401
from . import operations as operations  # noqa: F401
from .lazy import LazyPipeline
from .operations import (
    chunk,
    copy_insert_into_mapping,
    copy_insert_into_sequence,
    distinct,
    distinct_sorted,
    drop,
    filter_then_map,
    flat_map,
    flat_map_tokens,
    flatten,
    fold_items,
    group_by,
    map_then_filter,
    partition,
    penultimate,
    reduce_items,
    second,
    take,
    window,
    zip_with,
)

__all__ = [
    "containers",
    "lazy",
    "operations",
    "LazyPipeline",
    "chunk",
    "copy_insert_into_mapping",
    "copy_insert_into_sequence",
    "distinct",
    "distinct_sorted",
    "drop",
    "filter_then_map",
    "flat_map",
    "flat_map_tokens",
    "flatten",
    "fold_items",
    "group_by",
    "map_then_filter",
    "partition",
    "penultimate",
    "reduce_items",
    "second",
    "take",
    "window",
    "zip_with",
]
