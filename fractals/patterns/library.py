"""Algorithm selection and dispatch from a region to drawn segments."""
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from fractals.patterns import layout
from fractals.patterns.builder import (
    HilbertGenerator,
    KochGenerator,
    Orientation,
    SierpinskiGenerator,
)
from fractals.patterns.layout import SnowflakeSeed, SquareSeed, TriangleSeed
from fractals.render.sinks import LineSink, LineStyle
from fractals.state.geometry import Region, Segment

DEFAULT_MAX_DEPTH = 10


class Algorithm(Enum):
    SIERPINSKI_TRIANGLE = "sierpinski"
    KOCH_SNOWFLAKE = "koch"
    HILBERT_CURVE = "hilbert"

    @property
    def label(self) -> str:
        return ALGORITHM_LABELS[self]


ALGORITHM_LABELS: Dict[Algorithm, str] = {
    Algorithm.SIERPINSKI_TRIANGLE: "Sierpinski triangle",
    Algorithm.KOCH_SNOWFLAKE: "Koch snowflake",
    Algorithm.HILBERT_CURVE: "Hilbert curve",
}

DEFAULT_STYLES: Dict[Algorithm, LineStyle] = {
    Algorithm.SIERPINSKI_TRIANGLE: LineStyle((0, 0, 0), 1),
    Algorithm.KOCH_SNOWFLAKE: LineStyle((0, 0, 0), 1),
    Algorithm.HILBERT_CURVE: LineStyle((255, 0, 0), 1),
}

Seed = Union[TriangleSeed, SnowflakeSeed, SquareSeed]

_SEED_BUILDERS: Dict[Algorithm, Callable[[Region, float], Seed]] = {
    Algorithm.SIERPINSKI_TRIANGLE: layout.sierpinski_seed,
    Algorithm.KOCH_SNOWFLAKE: layout.koch_seed,
    Algorithm.HILBERT_CURVE: layout.hilbert_seed,
}

_sierpinski = SierpinskiGenerator()
_koch = KochGenerator()
_hilbert = HilbertGenerator()


def parse_algorithm(value: Union[str, Algorithm]) -> Algorithm:
    """Accept an Algorithm, its value ("koch") or its member name ("KOCH_SNOWFLAKE")."""
    if isinstance(value, Algorithm):
        return value
    key = str(value).strip()
    for algo in Algorithm:
        if key.lower() == algo.value or key.upper() == algo.name:
            return algo
    raise ValueError(f"Unknown algorithm: {value!r}")


def clamp_depth(depth: int, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    return max(0, min(int(depth), max_depth))


def build_seed(region: Region, algorithm: Algorithm, margin: float = layout.DEFAULT_MARGIN) -> Seed:
    return _SEED_BUILDERS[algorithm](region, margin)


def segments_from_seed(seed: Seed, depth: int) -> List[Segment]:
    if isinstance(seed, TriangleSeed):
        return _sierpinski.generate(depth, seed.top, seed.left, seed.right)
    if isinstance(seed, SnowflakeSeed):
        return _koch.snowflake(depth, seed.top, seed.left, seed.right)
    if isinstance(seed, SquareSeed):
        segments, _ = _hilbert.generate(depth, seed.xmin, seed.xmax, seed.ymin, seed.ymax, Orientation.UP)
        return segments
    raise TypeError(f"Unsupported seed: {seed!r}")


def generate_segments(
    region: Region,
    depth: int,
    algorithm: Algorithm,
    margin: float = layout.DEFAULT_MARGIN,
) -> List[Segment]:
    """Ordered segments for one fractal fitted into region. Negative depth draws the seed only."""
    seed = build_seed(region, algorithm, margin)
    return segments_from_seed(seed, max(0, depth))


def render(
    region: Region,
    depth: int,
    algorithm: Algorithm,
    sink: LineSink,
    margin: float = layout.DEFAULT_MARGIN,
    styles: Optional[Dict[Algorithm, LineStyle]] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    logger=None,
) -> int:
    """
    Feed every segment of the selected fractal to sink.draw_line in traversal
    order and return how many were drawn. Depth is clamped to [0, max_depth].
    """
    used_depth = clamp_depth(depth, max_depth)
    if logger and used_depth != depth:
        logger(f"[render] depth {depth} clamped to {used_depth}")
    style = (styles or DEFAULT_STYLES).get(algorithm, DEFAULT_STYLES[algorithm])
    segments = generate_segments(region, used_depth, algorithm, margin)
    for seg in segments:
        sink.draw_line(seg.a, seg.b, style)
    if logger:
        logger(f"[render] {algorithm.value} depth={used_depth} segments={len(segments)}")
    return len(segments)
