"""Elapsed-time helpers used to compare eager and lazy pipelines."""
from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Tuple, TypeVar

T = TypeVar("T")

__all__ = ["Timer", "timed", "measure_millis"]


@dataclass
class Timer:
    elapsed_ms: float = 0.0


@contextmanager
def timed() -> Iterator[Timer]:
    """Measure the wall time of a ``with`` block; read ``.elapsed_ms`` afterwards."""
    timer = Timer()
    start = time.perf_counter()
    try:
        yield timer
    finally:
        timer.elapsed_ms = (time.perf_counter() - start) * 1000.0


def measure_millis(block: Callable[[], T]) -> Tuple[T, float]:
    """Run `block` once and return (its result, elapsed milliseconds)."""
    with timed() as timer:
        result = block()
    return result, timer.elapsed_ms
