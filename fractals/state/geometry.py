from dataclasses import dataclass
from typing import Tuple

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Segment:
    """One straight line from a to b, in drawing-surface coordinates."""

    a: Vec2
    b: Vec2


@dataclass(frozen=True)
class Region:
    """Available drawing area; origin is the top-left corner, y grows downward."""

    width: float
    height: float


def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def midpoint(a: Vec2, b: Vec2) -> Vec2:
    return lerp(a, b, 0.5)


def rotate_offset(p: Vec2, dx: float, dy: float) -> Vec2:
    """Offset p by the vector (dx, dy) rotated a quarter turn: p + (-dy, dx)."""
    return (p[0] - dy, p[1] + dx)
