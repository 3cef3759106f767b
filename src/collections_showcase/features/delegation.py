"""Explicit value holders that run callbacks on write.

There is no implicit attribute interception here: callers read and write
through `get()` / `set()`, which makes the callback points obvious.

    Observable: notifies ``on_change(old, new)`` after every write
    Vetoable:   asks ``validator(old, new)`` first; a False answer rejects
                the write and the held value stays as it was

`ExpensiveResource` shows compute-once values via `functools.cached_property`.
"""
from __future__ import annotations

import logging
from functools import cached_property
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["Observable", "Vetoable", "ExpensiveResource"]


class Observable(Generic[T]):
    def __init__(self, initial: T, on_change: Callable[[T, T], None]):
        self._value = initial
        self._on_change = on_change

    def get(self) -> T:
        return self._value

    def set(self, new: T) -> None:
        old = self._value
        self._value = new
        self._on_change(old, new)


class Vetoable(Generic[T]):
    def __init__(self, initial: T, validator: Callable[[T, T], bool]):
        self._value = initial
        self._validator = validator

    def get(self) -> T:
        return self._value

    def set(self, new: T) -> bool:
        """Store `new` if the validator accepts it. Returns whether it was stored."""
        if not self._validator(self._value, new):
            logger.debug("Vetoable: rejected write %r (kept %r)", new, self._value)
            return False
        self._value = new
        return True


class ExpensiveResource:
    """Holds a value computed on first access and reused afterwards."""

    def __init__(self, compute: Optional[Callable[[], str]] = None):
        self._compute = compute or (lambda: "Expensive result")
        self.compute_count = 0

    @cached_property
    def expensive_value(self) -> str:
        self.compute_count += 1
        return self._compute()
