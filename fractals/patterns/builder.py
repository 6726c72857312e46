"""Recursive segment builders for the three fractal curves."""
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from fractals.state.geometry import Segment, Vec2, lerp, midpoint, rotate_offset

# Koch bump apex offset per unit of edge vector: equilateral bump on the middle third
KOCH_BUMP_SCALE = 1.0 / (2.0 * math.sqrt(3.0))


class Orientation(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Quadrant names; "bottom" is the larger-y half because y grows downward.
BOTTOM_LEFT = "bottom_left"
TOP_LEFT = "top_left"
TOP_RIGHT = "top_right"
BOTTOM_RIGHT = "bottom_right"

# Visit order per orientation, each quadrant carrying its own sub-orientation.
# Consecutive leaves always land in edge-adjacent cells.
HILBERT_VISITS = {
    Orientation.UP: (
        (BOTTOM_LEFT, Orientation.RIGHT),
        (TOP_LEFT, Orientation.UP),
        (TOP_RIGHT, Orientation.UP),
        (BOTTOM_RIGHT, Orientation.LEFT),
    ),
    Orientation.DOWN: (
        (TOP_RIGHT, Orientation.LEFT),
        (BOTTOM_RIGHT, Orientation.DOWN),
        (BOTTOM_LEFT, Orientation.DOWN),
        (TOP_LEFT, Orientation.RIGHT),
    ),
    Orientation.LEFT: (
        (TOP_RIGHT, Orientation.DOWN),
        (TOP_LEFT, Orientation.LEFT),
        (BOTTOM_LEFT, Orientation.LEFT),
        (BOTTOM_RIGHT, Orientation.UP),
    ),
    Orientation.RIGHT: (
        (BOTTOM_LEFT, Orientation.UP),
        (BOTTOM_RIGHT, Orientation.RIGHT),
        (TOP_RIGHT, Orientation.RIGHT),
        (TOP_LEFT, Orientation.DOWN),
    ),
}


@dataclass(frozen=True)
class HilbertState:
    """Pen position carried between Hilbert leaves; None until the first leaf."""

    last: Optional[Vec2] = None


@dataclass
class GeneratorBase:
    name: str


@dataclass
class SierpinskiGenerator(GeneratorBase):
    def __init__(self) -> None:
        super().__init__(name="Sierpinski")

    def generate(self, depth: int, a: Vec2, b: Vec2, c: Vec2) -> List[Segment]:
        """Outer triangle first, then every punched-out midpoint triangle."""
        out = [Segment(a, b), Segment(b, c), Segment(c, a)]
        self._subdivide(depth, a, b, c, out)
        return out

    def _subdivide(self, depth: int, a: Vec2, b: Vec2, c: Vec2, out: List[Segment]) -> None:
        if depth <= 0:
            return
        ab = midpoint(a, b)
        bc = midpoint(b, c)
        ac = midpoint(a, c)
        out.extend([Segment(ab, bc), Segment(bc, ac), Segment(ab, ac)])
        self._subdivide(depth - 1, a, ac, ab, out)
        self._subdivide(depth - 1, b, ab, bc, out)
        self._subdivide(depth - 1, c, ac, bc, out)


@dataclass
class KochGenerator(GeneratorBase):
    def __init__(self) -> None:
        super().__init__(name="Koch")

    def generate(self, depth: int, a: Vec2, b: Vec2) -> List[Segment]:
        out: List[Segment] = []
        self._edge(depth, a, b, out)
        return out

    def snowflake(self, depth: int, top: Vec2, left: Vec2, right: Vec2) -> List[Segment]:
        """
        Koch curve on each triangle edge. With y growing downward, walking
        top -> left -> right -> top puts every bump on the outside.
        """
        out: List[Segment] = []
        self._edge(depth, top, left, out)
        self._edge(depth, left, right, out)
        self._edge(depth, right, top, out)
        return out

    def _edge(self, depth: int, a: Vec2, b: Vec2, out: List[Segment]) -> None:
        if depth <= 0:
            out.append(Segment(a, b))
            return
        p1 = lerp(a, b, 1.0 / 3.0)
        p3 = lerp(a, b, 2.0 / 3.0)
        dx = (b[0] - a[0]) * KOCH_BUMP_SCALE
        dy = (b[1] - a[1]) * KOCH_BUMP_SCALE
        p2 = rotate_offset(midpoint(a, b), dx, dy)
        self._edge(depth - 1, a, p1, out)
        self._edge(depth - 1, p1, p2, out)
        self._edge(depth - 1, p2, p3, out)
        self._edge(depth - 1, p3, b, out)


@dataclass
class HilbertGenerator(GeneratorBase):
    def __init__(self) -> None:
        super().__init__(name="Hilbert")

    def generate(
        self,
        depth: int,
        xmin: float,
        xmax: float,
        ymin: float,
        ymax: float,
        orientation: Orientation = Orientation.UP,
        state: Optional[HilbertState] = None,
    ) -> Tuple[List[Segment], HilbertState]:
        """
        Connect the centres of the depth-0 cells in visiting order.
        Returns the segments and the state after the last leaf, so a caller
        can continue the same path into a neighbouring square.
        """
        out: List[Segment] = []
        if state is None:
            state = HilbertState()
        state = self._visit(depth, xmin, xmax, ymin, ymax, orientation, state, out)
        return out, state

    def _visit(
        self,
        depth: int,
        xmin: float,
        xmax: float,
        ymin: float,
        ymax: float,
        orientation: Orientation,
        state: HilbertState,
        out: List[Segment],
    ) -> HilbertState:
        cx = (xmin + xmax) / 2.0
        cy = (ymin + ymax) / 2.0
        if depth <= 0:
            center = (cx, cy)
            if state.last is not None:
                out.append(Segment(state.last, center))
            return HilbertState(last=center)

        quadrants = {
            BOTTOM_LEFT: (xmin, cx, cy, ymax),
            TOP_LEFT: (xmin, cx, ymin, cy),
            TOP_RIGHT: (cx, xmax, ymin, cy),
            BOTTOM_RIGHT: (cx, xmax, cy, ymax),
        }
        for quadrant, sub_orientation in HILBERT_VISITS[orientation]:
            qxmin, qxmax, qymin, qymax = quadrants[quadrant]
            state = self._visit(depth - 1, qxmin, qxmax, qymin, qymax, sub_orientation, state, out)
        return state
