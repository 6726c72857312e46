import math

from fractals.state.geometry import lerp, midpoint, rotate_offset


def test_lerp_endpoints_and_thirds():
    a, b = (0.0, 0.0), (3.0, 6.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(a, b, 1.0 / 3.0) == (1.0, 2.0)


def test_midpoint():
    assert midpoint((2.0, -4.0), (4.0, 0.0)) == (3.0, -2.0)


def test_rotate_offset_is_quarter_turn():
    # (dx, dy) = (1, 0) rotates to (0, 1)
    assert rotate_offset((5.0, 5.0), 1.0, 0.0) == (5.0, 6.0)
    # (dx, dy) = (0, 1) rotates to (-1, 0)
    assert rotate_offset((5.0, 5.0), 0.0, 1.0) == (4.0, 5.0)
    p = rotate_offset((0.0, 0.0), 3.0, 4.0)
    assert math.isclose(math.hypot(*p), 5.0)
