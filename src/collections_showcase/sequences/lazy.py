"""Deferred, single-pass transformation pipelines.

`LazyPipeline` wraps any iterable and chains generator stages so a long
chain such as filter -> map -> filter -> take touches each source element at
most once and stops pulling as soon as the terminal operation is satisfied.
Nothing runs until a terminal method (`to_list`, `sorted`, `first`) is called.

Results are identical to the eager functions in
`collections_showcase.sequences.operations`; only the cost profile differs.
A pipeline is single-use: its stages share one underlying iterator.
"""
from __future__ import annotations

import logging
from itertools import islice
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from ..errors import EmptyInputError, InvalidArgumentError
from .operations import window as _window_eager

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

__all__ = ["LazyPipeline", "squares_sequence", "chained_even_squares"]


class LazyPipeline(Generic[T]):
    """Chainable lazy view over an iterable."""

    def __init__(self, source: Iterable[T]):
        self._source: Iterator[T] = iter(source)
        self._consumed = False

    def _next(self, stage: Iterable[U]) -> "LazyPipeline[U]":
        self._claim()
        return LazyPipeline(stage)

    def _claim(self) -> Iterator[T]:
        if self._consumed:
            raise InvalidArgumentError("pipeline already consumed; build a new one")
        self._consumed = True
        return self._source

    # ---------------- Intermediate (deferred) stages -----------------
    def map(self, transform: Callable[[T], U]) -> "LazyPipeline[U]":
        return self._next(transform(item) for item in self._source)

    def filter(self, predicate: Callable[[T], bool]) -> "LazyPipeline[T]":
        return self._next(item for item in self._source if predicate(item))

    def flat_map(self, expand: Callable[[T], Iterable[U]]) -> "LazyPipeline[U]":
        return self._next(value for item in self._source for value in expand(item))

    def take(self, n: int) -> "LazyPipeline[T]":
        return self._next(islice(self._source, n))

    def drop(self, n: int) -> "LazyPipeline[T]":
        return self._next(islice(self._source, n, None))

    def chunk(self, size: int) -> "LazyPipeline[List[T]]":
        if size < 1:
            raise InvalidArgumentError(f"chunk size must be >= 1 (got {size})")
        source = self._source

        def _chunks() -> Iterator[List[T]]:
            while True:
                group = list(islice(source, size))
                if not group:
                    return
                yield group

        return self._next(_chunks())

    def window(self, size: int, step: int = 1, allow_partial: bool = False) -> "LazyPipeline[List[T]]":
        """Sliding windows; buffers the remaining input once, on first pull."""
        if size < 1:
            raise InvalidArgumentError(f"window size must be >= 1 (got {size})")
        if step < 1:
            raise InvalidArgumentError(f"window step must be >= 1 (got {step})")
        source = self._source

        def _windows() -> Iterator[List[T]]:
            yield from _window_eager(list(source), size, step=step, allow_partial=allow_partial)

        return self._next(_windows())

    # ---------------- Terminal operations -----------------
    def to_list(self) -> List[T]:
        return list(self._claim())

    def sorted(self, key: Optional[Callable[[T], Any]] = None) -> List[T]:
        return sorted(self._claim(), key=key)

    def first(self) -> T:
        """Return the first element, raising `EmptyInputError` if there is none."""
        for item in self._claim():
            return item
        raise EmptyInputError("pipeline produced no elements")

    def __iter__(self) -> Iterator[T]:
        return self._claim()


def squares_sequence(n: int) -> List[int]:
    """Squares of 1..n computed through a lazy pipeline."""
    return LazyPipeline(range(1, n + 1)).map(lambda x: x * x).to_list()


def chained_even_squares(numbers: Iterable[int], threshold: int = 10, limit: int = 3) -> List[int]:
    """Keep evens, square them, keep squares above `threshold`, sort, take `limit`.

    Sorting needs the full filtered stream, so the take happens after
    materialisation; the earlier stages still run in a single pass.
    """
    survivors = (
        LazyPipeline(numbers)
        .filter(lambda n: n % 2 == 0)
        .map(lambda n: n * n)
        .filter(lambda sq: sq > threshold)
        .sorted()
    )
    logger.debug("chained_even_squares: %d survivors before take(%d)", len(survivors), limit)
    return survivors[:limit]
