import math
import pytest
from polyiou.vector import Point, distance, angle
from polyiou.errors import DegenerateGeometryError

def test_tolerant_equality():
    assert Point(1.0, 2.0) == Point(1.0 + 5e-7, 2.0 - 5e-7)
    assert Point(1.0, 2.0) != Point(1.0 + 1e-5, 2.0)

def test_named_and_indexed_access_agree():
    p = Point(3, 4)
    assert p.x == p[0] == 3.0
    assert p.y == p[1] == 4.0
    assert list(p) == [3.0, 4.0]

def test_index_out_of_range_is_assertion():
    with pytest.raises(AssertionError):
        Point(1, 2)[2]

def test_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5

def test_arithmetic():
    a = Point(1, 2)
    b = Point(3, -1)
    assert a + b == Point(4, 1)
    assert a - b == Point(-2, 3)
    assert a * 2 == Point(2, 4)
    assert 2 * a == Point(2, 4)
    assert b / 2 == Point(1.5, -0.5)
    assert -a == Point(-1, -2)
    assert a.dmul(b) == Point(3, -2)
    assert a.ddiv(Point(2, 4)) == Point(0.5, 0.5)
    assert a.dot(b) == 1.0
    assert a.cross(b) == -7.0

def test_norm_and_distance():
    v = Point(3, 4)
    assert v.norm() == 5.0
    assert v.norm_squared() == 25.0
    assert distance(Point(0, 0), v) == 5.0
    assert v.square_distance(Point(0, 0)) == 25.0
    assert v.normalized() == Point(0.6, 0.8)

def test_zero_vector():
    assert Point(1e-7, -1e-7).is_zero()
    assert Point(0, 1).non_zero()
    with pytest.raises(DegenerateGeometryError):
        Point(0, 0).normalized()
    with pytest.raises(DegenerateGeometryError):
        Point(0, 0).theta()

def test_angle_between_vectors():
    assert math.isclose(angle(Point(1, 0), Point(0, 1)), math.pi / 2)
    assert math.isclose(Point(1, 0).angle(Point(-1, 0)), math.pi)
    assert math.isclose(Point(2, 2).angle(Point(1, 1)), 0.0, abs_tol=1e-7)

def test_theta_covers_full_turn():
    assert Point(1, 0).theta() == 0.0
    assert math.isclose(Point(0, 1).theta(), math.pi / 2)
    assert math.isclose(Point(-1, 0).theta(), math.pi)
    assert math.isclose(Point(0, -1).theta(), 3 * math.pi / 2)
    for k in range(16):
        a = 2 * math.pi * k / 16
        t = Point(math.cos(a), math.sin(a)).theta()
        assert 0.0 <= t < 2 * math.pi
        assert math.isclose(t, a, abs_tol=1e-9)
