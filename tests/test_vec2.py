import math

import pytest

from unrealize.vec2 import Vec2


def test_zero():
    assert Vec2.zero() == Vec2(0.0, 0.0)


def test_add_sub_round_trip():
    a = Vec2(1.5, -2.25)
    b = Vec2(-7.0, 3.5)
    assert (a + b) - b == a


def test_mul_and_rmul_agree():
    v = Vec2(2.0, -3.0)
    assert v * 2.5 == 2.5 * v
    assert (v * 2.5).x == pytest.approx(2.0 * 2.5)


def test_neg_is_mul_minus_one():
    v = Vec2(4.0, -1.0)
    assert -v == v * -1.0
    assert v + (-v) == Vec2.zero()


def test_length():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


def test_dot_orthogonal_and_self():
    v = Vec2(2.0, 7.0)
    assert v.dot(Vec2(-7.0, 2.0)) == 0.0
    assert v.dot(v) == pytest.approx(v.length() ** 2)


@pytest.mark.parametrize("v", [Vec2(3.0, 4.0), Vec2(-0.001, 1e3), Vec2(1.0, 0.0)])
def test_normalize_gives_unit_length(v):
    n = v.normalize()
    assert n.length() == pytest.approx(1.0)
    assert math.atan2(n.y, n.x) == pytest.approx(math.atan2(v.y, v.x))


def test_normalize_zero_is_zero():
    assert Vec2.zero().normalize() == Vec2.zero()


def test_frozen():
    v = Vec2(1.0, 2.0)
    with pytest.raises(AttributeError):
        v.x = 3.0
    assert v.x == 1.0
    assert v == Vec2(1.0, 2.0)