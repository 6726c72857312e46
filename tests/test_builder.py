import math

import pytest

from fractals.patterns.builder import (
    HilbertGenerator,
    HilbertState,
    KochGenerator,
    Orientation,
    SierpinskiGenerator,
)
from fractals.state.geometry import Segment

A, B, C = (50.0, 0.0), (0.0, 100.0), (100.0, 100.0)


def _length(seg):
    return math.hypot(seg.b[0] - seg.a[0], seg.b[1] - seg.a[1])


@pytest.mark.parametrize("depth, expected", [(0, 3), (1, 6), (2, 15), (3, 42), (4, 123)])
def test_sierpinski_segment_count(depth, expected):
    assert len(SierpinskiGenerator().generate(depth, A, B, C)) == expected
    assert expected == 3 + 3 * (3 ** depth - 1) // 2


def test_sierpinski_depth_zero_is_outer_triangle():
    assert SierpinskiGenerator().generate(0, A, B, C) == [Segment(A, B), Segment(B, C), Segment(C, A)]


def test_sierpinski_depth_one_adds_midpoint_triangle():
    segs = SierpinskiGenerator().generate(1, A, B, C)
    ab, bc, ac = (25.0, 50.0), (50.0, 100.0), (75.0, 50.0)
    assert segs[3:] == [Segment(ab, bc), Segment(bc, ac), Segment(ab, ac)]


def test_sierpinski_recurses_into_corners_in_order():
    segs = SierpinskiGenerator().generate(2, A, B, C)
    # first corner triangle is (a, ac, ab); its inner triangle comes right after the level-1 one
    ab, ac = (25.0, 50.0), (75.0, 50.0)
    first_corner_mid = (ac[0] + ab[0]) / 2, (ac[1] + ab[1]) / 2
    assert segs[6].a == pytest.approx(((A[0] + ac[0]) / 2, (A[1] + ac[1]) / 2))
    assert segs[6].b == pytest.approx(first_corner_mid)


@pytest.mark.parametrize("depth", [0, 1, 2, 3, 4])
def test_koch_edge_segment_count(depth):
    assert len(KochGenerator().generate(depth, (0.0, 0.0), (3.0, 0.0))) == 4 ** depth


def test_koch_depth_one_single_bump():
    segs = KochGenerator().generate(1, (0.0, 0.0), (3.0, 0.0))
    apex = (1.5, math.sqrt(3) / 2)
    expected = [
        ((0.0, 0.0), (1.0, 0.0)),
        ((1.0, 0.0), apex),
        (apex, (2.0, 0.0)),
        ((2.0, 0.0), (3.0, 0.0)),
    ]
    assert len(segs) == 4
    for seg, (a, b) in zip(segs, expected):
        assert seg.a == pytest.approx(a)
        assert seg.b == pytest.approx(b)
    # equilateral bump: every piece is a third of the edge
    for seg in segs:
        assert _length(seg) == pytest.approx(1.0)


def test_koch_path_is_connected():
    segs = KochGenerator().generate(3, (0.0, 0.0), (27.0, 0.0))
    for prev, nxt in zip(segs, segs[1:]):
        assert prev.b == pytest.approx(nxt.a)
    assert segs[0].a == (0.0, 0.0)
    assert segs[-1].b == pytest.approx((27.0, 0.0))


def test_koch_snowflake_bumps_point_outward():
    top, left, right = (50.0, 0.0), (0.0, 50 * math.sqrt(3)), (100.0, 50 * math.sqrt(3))
    centroid = ((top[0] + left[0] + right[0]) / 3, (top[1] + left[1] + right[1]) / 3)
    segs = KochGenerator().snowflake(1, top, left, right)
    assert len(segs) == 12
    for i, (a, b) in enumerate([(top, left), (left, right), (right, top)]):
        apex = segs[4 * i + 1].b
        edge_mid = ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)
        assert math.dist(apex, centroid) > math.dist(edge_mid, centroid)


@pytest.mark.parametrize("depth", [0, 1, 2, 3, 4, 5])
def test_hilbert_segment_count(depth):
    segs, _ = HilbertGenerator().generate(depth, 0.0, 64.0, 0.0, 64.0)
    assert len(segs) == 4 ** depth - 1


def test_hilbert_depth_zero_draws_nothing_but_sets_pen():
    segs, state = HilbertGenerator().generate(0, 0.0, 4.0, 0.0, 4.0)
    assert segs == []
    assert state == HilbertState(last=(2.0, 2.0))


def test_hilbert_depth_one_up_is_cap_shape():
    segs, state = HilbertGenerator().generate(1, 0.0, 4.0, 0.0, 4.0, Orientation.UP)
    # bottom-left, top-left, top-right, bottom-right (y grows downward)
    assert segs == [
        Segment((1.0, 3.0), (1.0, 1.0)),
        Segment((1.0, 1.0), (3.0, 1.0)),
        Segment((3.0, 1.0), (3.0, 3.0)),
    ]
    assert state.last == (3.0, 3.0)


@pytest.mark.parametrize("orientation", list(Orientation))
@pytest.mark.parametrize("depth", [1, 2, 3, 4])
def test_hilbert_path_is_continuous_and_covers_every_cell(orientation, depth):
    side = 2.0 ** depth
    segs, _ = HilbertGenerator().generate(depth, 0.0, side, 0.0, side, orientation)
    for seg in segs:
        assert _length(seg) == pytest.approx(1.0)
    for prev, nxt in zip(segs, segs[1:]):
        assert prev.b == nxt.a
    cells = {segs[0].a} | {seg.b for seg in segs}
    assert len(cells) == 4 ** depth


def test_hilbert_state_continues_into_next_square():
    gen = HilbertGenerator()
    first, state = gen.generate(1, 0.0, 4.0, 0.0, 4.0)
    second, _ = gen.generate(1, 4.0, 8.0, 0.0, 4.0, state=state)
    assert second[0] == Segment((3.0, 3.0), (5.0, 3.0))
    assert len(first) + len(second) == 7


def test_generators_are_deterministic():
    k = KochGenerator()
    h = HilbertGenerator()
    assert k.generate(4, (0.0, 0.0), (1.0, 2.0)) == k.generate(4, (0.0, 0.0), (1.0, 2.0))
    assert h.generate(4, 0.0, 1.0, 0.0, 1.0) == h.generate(4, 0.0, 1.0, 0.0, 1.0)
