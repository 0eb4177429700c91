"""Small integer and geometry helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Point", "factorial", "gcd", "fibonacci", "log_base2", "distance"]


@dataclass(frozen=True)
class Point:
    """A point on the integer grid."""

    x: int
    y: int


def factorial(n: int) -> int:
    """Return ``n!``; ``n`` must not be negative."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm."""
    if a < 0 or b < 0:
        raise ValueError("gcd requires non-negative arguments")
    while b:
        a, b = b, a % b
    return a


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("fibonacci is undefined for negative indices")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def log_base2(value: int) -> int:
    """Return the floor of log2 of ``value``, or 0 when ``value <= 1``."""
    if value <= 1:
        return 0
    return value.bit_length() - 1


def distance(a: Point, b: Point) -> float:
    """Return the Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)