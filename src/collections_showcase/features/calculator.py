"""Toy calculator exercised by the unit tests."""
from __future__ import annotations

import logging
import math
import time

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)

__all__ = ["Calculator"]


class Calculator:
    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def divide(self, a: int, b: int) -> float:
        """True division.

        Raises:
            ZeroDivisionError: `b` is zero.
        """
        if b == 0:
            raise ZeroDivisionError("Division by zero")
        return a / b

    def power(self, base: int, exponent: int) -> int:
        """Integer power; exact for non-negative exponents.

        Negative exponents truncate the fractional result toward zero
        (2 ** -1 -> 0, 1 ** -3 -> 1).

        Raises:
            ZeroDivisionError: `base` is zero and `exponent` is negative.
        """
        if exponent >= 0:
            return base ** exponent
        if base == 0:
            raise ZeroDivisionError("Zero cannot be raised to a negative power")
        if abs(base) == 1:
            return base ** -exponent
        return 0

    def square_root(self, number: float) -> float:
        if number < 0:
            raise InvalidArgumentError("Cannot calculate square root of negative number")
        return math.sqrt(number)

    def slow_operation(self, delay_seconds: float = 1.0) -> None:
        logger.debug("slow_operation sleeping %.3fs", delay_seconds)
        time.sleep(delay_seconds)
