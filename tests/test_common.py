import math

import pytest

from ltlr.common import (
    COLOR_TRANSPARENT,
    COLOR_WHITE,
    VECTOR2_ZERO,
    Color,
    Direction,
    Rectangle,
    Reflection,
    Vector2,
    sign,
)


@pytest.mark.parametrize("value, expected", [(-3.5, -1), (0, 0), (0.0, 0), (2, 1)])
def test_sign(value, expected):
    assert sign(value) == expected


def test_vector_scale_and_dot():
    v = Vector2(3.0, -2.0)
    assert v.scale(2.0) == Vector2(6.0, -4.0)
    assert v.dot(v) == pytest.approx(math.hypot(v.x, v.y) ** 2)
    assert v.dot(Vector2(-v.y, v.x)) == 0


def test_vector_normalize_has_unit_length():
    n = Vector2(3.0, 7.0).normalize()
    assert math.hypot(n.x, n.y) == pytest.approx(1.0)
    assert n.x > 0 and n.y > 0


def test_vector_normalize_zero_stays_zero():
    assert VECTOR2_ZERO.normalize() == VECTOR2_ZERO


def test_vector_lerp_endpoints():
    a = Vector2(1.0, 2.0)
    b = Vector2(5.0, -6.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b
    mid = a.lerp(b, 0.5)
    assert mid.x == pytest.approx((a.x + b.x) / 2)


def test_vector_arithmetic():
    a = Vector2(1.0, 2.0)
    b = Vector2(4.0, 8.0)
    assert (a + b) - b == a
    assert -a + a == VECTOR2_ZERO


def test_rectangle_edges():
    r = Rectangle(1.0, 2.0, 3.0, 4.0)
    assert r.right - r.left == r.width
    assert r.bottom - r.top == r.height
    assert r.left == r.x and r.top == r.y


def test_rectangle_contains():
    outer = Rectangle(0, 0, 10, 10)
    assert outer.contains(outer)
    assert outer.contains(Rectangle(2, 2, 3, 3))
    assert not outer.contains(Rectangle(8, 8, 3, 3))
    assert not Rectangle(2, 2, 3, 3).contains(outer)


def test_rectangle_intersects_symmetric():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(5, 5, 10, 10)
    c = Rectangle(10, 0, 5, 5)
    assert a.intersects(b) and b.intersects(a)
    assert not a.intersects(c) and not c.intersects(a)


def test_rectangle_overlap_lies_in_both():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(5, 3, 10, 10)
    o = a.overlap(b)
    assert a.contains(o) and b.contains(o)
    assert o == b.overlap(a)
    assert o.width > 0 and o.height > 0


def test_rectangle_overlap_empty_when_apart():
    assert Rectangle(0, 0, 1, 1).overlap(Rectangle(5, 5, 1, 1)) == Rectangle()


def test_color_multiply():
    assert COLOR_WHITE.multiply(1.0) == COLOR_WHITE
    assert COLOR_WHITE.multiply(0.0) == COLOR_TRANSPARENT
    half = Color(200, 100, 50, 255).multiply(0.5)
    assert half.r == 100 and half.g == 50 and half.b == 25


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_flags_from_values():
    assert Direction(1) is Direction.LEFT
    assert Direction(4) is Direction.RIGHT
    both = Direction(1 | 4)
    assert both & Direction.RIGHT
    assert not both & Direction.UP
    flipped = Reflection(3)
    assert flipped & Reflection.REVERSE_Y_AXIS
    assert flipped & Reflection.REVERSE_X_AXIS