"""Plain 2D vector helpers over ``(x, y)`` tuples."""

from __future__ import annotations

import math
from typing import Tuple

Point2D = Tuple[float, float]
Vector2D = Tuple[float, float]

# Direction used when two points coincide; keeps normalize() away from 0/0.
COINCIDENT_FALLBACK: Vector2D = (1.0, 1.0)


def subtract(a: Point2D, b: Point2D) -> Vector2D:
    """Return ``a - b``.

    Coincident points yield :data:`COINCIDENT_FALLBACK` instead of the zero
    vector, so the result can always be normalized.
    """

    if a[0] == b[0] and a[1] == b[1]:
        return COINCIDENT_FALLBACK
    return (a[0] - b[0], a[1] - b[1])


def add(a: Point2D, b: Vector2D) -> Point2D:
    return (a[0] + b[0], a[1] + b[1])


def scale(v: Vector2D, factor: float) -> Vector2D:
    return (v[0] * factor, v[1] * factor)


def length(v: Vector2D) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Vector2D) -> Vector2D:
    """Return the unit vector of ``v``; ``v`` must not be the zero vector."""

    n = length(v)
    return (v[0] / n, v[1] / n)


def flip(v: Vector2D) -> Vector2D:
    return (-v[0], -v[1])


def cross(a: Vector2D, b: Vector2D) -> float:
    return a[0] * b[1] - a[1] * b[0]


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


__all__ = [
    "Point2D",
    "Vector2D",
    "COINCIDENT_FALLBACK",
    "subtract",
    "add",
    "scale",
    "length",
    "normalize",
    "flip",
    "cross",
    "distance",
]
