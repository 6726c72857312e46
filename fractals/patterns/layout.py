"""Seed geometry: fit each fractal's starting polygon into a drawing region."""
import math
from dataclasses import dataclass

from fractals.state.geometry import Region, Vec2

DEFAULT_MARGIN = 20.0

# height of an equilateral triangle per unit side
TRIANGLE_HEIGHT_PER_SIDE = math.sqrt(3.0) / 2.0
# a Koch snowflake reaches a third of the triangle height below the base
SNOWFLAKE_HEIGHT_FACTOR = 4.0 / 3.0


@dataclass(frozen=True)
class TriangleSeed:
    """Apex-up equilateral triangle: top, bottom-left, bottom-right."""

    top: Vec2
    left: Vec2
    right: Vec2


@dataclass(frozen=True)
class SnowflakeSeed:
    top: Vec2
    left: Vec2
    right: Vec2


@dataclass(frozen=True)
class SquareSeed:
    xmin: float
    xmax: float
    ymin: float
    ymax: float


def _centered_triangle(region: Region, side: float, top_y: float) -> tuple:
    height = TRIANGLE_HEIGHT_PER_SIDE * side
    cx = region.width / 2.0
    base_y = top_y + height
    return (cx, top_y), (cx - side / 2.0, base_y), (cx + side / 2.0, base_y)


def sierpinski_seed(region: Region, margin: float = DEFAULT_MARGIN) -> TriangleSeed:
    """Largest apex-up equilateral triangle that fits the margin-reduced box, centred."""
    side = min(region.width - 2 * margin, (region.height - 2 * margin) / TRIANGLE_HEIGHT_PER_SIDE)
    height = TRIANGLE_HEIGHT_PER_SIDE * side
    top_y = region.height / 2.0 - height / 2.0
    return TriangleSeed(*_centered_triangle(region, side, top_y))


def koch_seed(region: Region, margin: float = DEFAULT_MARGIN) -> SnowflakeSeed:
    """
    Triangle sized so the finished snowflake fits: its vertical extent is 4/3 of
    the triangle height and its width equals the triangle side.
    """
    extent_per_side = SNOWFLAKE_HEIGHT_FACTOR * TRIANGLE_HEIGHT_PER_SIDE
    side = min(region.width - 2 * margin, (region.height - 2 * margin) / extent_per_side)
    extent = extent_per_side * side
    top_y = (region.height - extent) / 2.0
    return SnowflakeSeed(*_centered_triangle(region, side, top_y))


def hilbert_seed(region: Region, margin: float = DEFAULT_MARGIN) -> SquareSeed:
    side = min(region.width - 2 * margin, region.height - 2 * margin)
    xmin = (region.width - side) / 2.0
    ymin = (region.height - side) / 2.0
    return SquareSeed(xmin, xmin + side, ymin, ymin + side)
