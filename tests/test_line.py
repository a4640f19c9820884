import pytest
from polyiou.line import Line, is_on_line, intersection
from polyiou.vector import Point
from polyiou.errors import DegenerateGeometryError

def test_length_and_indexing():
    line = Line(Point(0, 0), Point(3, 4))
    assert line.length() == 5.0
    assert line[0] == Point(0, 0)
    assert line.p2 == Point(3, 4)

def test_on_line_diagonal():
    line = Line((0, 0), (2, 2))
    assert line.is_on_line(Point(1, 1))
    assert line.is_on_line(Point(0, 0))
    assert line.is_on_line(Point(2, 2))
    assert not line.is_on_line(Point(3, 3))
    assert not line.is_on_line(Point(1, 1.1))

def test_on_line_axis_aligned():
    vertical = Line((1, 0), (1, 5))
    horizontal = Line((0, 2), (4, 2))
    assert vertical.is_on_line(Point(1, 2.5))
    assert not vertical.is_on_line(Point(1, 5.5))
    assert horizontal.is_on_line(Point(4, 2))
    assert not horizontal.is_on_line(Point(2, 2.01))

def test_module_helper_accepts_either_order():
    line = Line((0, 0), (1, 0))
    p = Point(0.5, 0)
    assert is_on_line(line, p)
    assert is_on_line(p, line)

def test_intersection_reports_only_this_segment():
    a = Line((0, 0), (2, 2))
    b = Line((0, 2), (2, 0))
    pt, on_a = intersection(a, b)
    assert pt == Point(1, 1)
    assert on_a
    short = Line((0, 0), (0.5, 0.5))
    pt, on_short = short.intersection(b)
    assert pt == Point(1, 1)
    assert not on_short

def test_parallel_lines_raise():
    a = Line((0, 0), (1, 0))
    b = Line((0, 1), (5, 1))
    with pytest.raises(DegenerateGeometryError):
        a.intersection(b)
    assert a.segment_intersection(b) is None

def test_segment_intersection_checks_both_segments():
    a = Line((0, 0), (4, 0))
    b = Line((2, -1), (2, 1))
    c = Line((2, 1), (2, 3))
    assert a.segment_intersection(b) == Point(2, 0)
    assert a.segment_intersection(c) is None
