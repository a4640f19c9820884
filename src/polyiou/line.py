"""
Line segment primitive.

A Line is an ordered pair of points. Containment is tested against the finite
segment, intersection is computed between the infinite lines through the two
segments.
"""

from typing import Optional, Tuple

from .config import resolve_eps
from .errors import DegenerateGeometryError
from .vector import Point


class Line:
    """Segment from p1 to p2."""

    __slots__ = ("_vert",)

    def __init__(self, p1: Point = None, p2: Point = None):
        p1 = Point() if p1 is None else Point.from_any(p1)
        p2 = Point() if p2 is None else Point.from_any(p2)
        self._vert = (p1, p2)

    @property
    def p1(self) -> Point:
        return self._vert[0]

    @property
    def p2(self) -> Point:
        return self._vert[1]

    def __getitem__(self, i: int) -> Point:
        assert i in (0, 1), f"vertex index out of range: {i}"
        return self._vert[i]

    def __iter__(self):
        return iter(self._vert)

    def __repr__(self) -> str:
        return f"Line({self.p1!r}, {self.p2!r})"

    def direction(self) -> Point:
        return self.p2 - self.p1

    def length(self) -> float:
        return self.p1.distance(self.p2)

    def is_parallel(self, line: "Line", eps: Optional[float] = None) -> bool:
        """
        True when the two directions are parallel within eps, or when either
        segment has zero length. The test is on the sine of the angle between
        the directions so it does not depend on segment length.
        """
        eps = resolve_eps(eps)
        d1 = self.direction()
        d2 = line.direction()
        n1 = d1.norm()
        n2 = d2.norm()
        if n1 <= eps or n2 <= eps:
            return True
        return abs(d1.cross(d2)) <= eps * n1 * n2

    def is_on_line(self, p: Point, eps: Optional[float] = None) -> bool:
        """
        True when p is within eps of the segment.

        The perpendicular distance to the supporting line must be within eps
        and p must fall inside the segment's bounding extent, endpoints
        included.
        """
        eps = resolve_eps(eps)
        d = self.direction()
        length = d.norm()
        if length <= eps:
            return p.is_close(self.p1, eps)
        dist = abs(d.cross(p - self.p1)) / length
        if dist > eps:
            return False
        x_lo, x_hi = sorted((self.p1.x, self.p2.x))
        y_lo, y_hi = sorted((self.p1.y, self.p2.y))
        return (x_lo - eps <= p.x <= x_hi + eps) and (y_lo - eps <= p.y <= y_hi + eps)

    def intersection(self, line: "Line", eps: Optional[float] = None) -> Tuple[Point, bool]:
        """
        Intersect the infinite lines through self and line.

        Returns (point, on_line) where on_line reports whether the point lies
        on this segment. It says nothing about the other segment, callers that
        need a true segment crossing must check both.

        Raises DegenerateGeometryError when the lines are parallel.
        """
        eps = resolve_eps(eps)
        if self.is_parallel(line, eps):
            raise DegenerateGeometryError(f"parallel lines have no single intersection: {self!r} {line!r}")
        d1 = self.direction()
        d2 = line.direction()
        t = (line.p1 - self.p1).cross(d2) / d1.cross(d2)
        pt = self.p1 + d1 * t
        return pt, self.is_on_line(pt, eps)

    def segment_intersection(self, line: "Line", eps: Optional[float] = None) -> Optional[Point]:
        """
        Crossing point of the two finite segments, or None when they do not
        cross or are parallel.
        """
        eps = resolve_eps(eps)
        if self.is_parallel(line, eps):
            return None
        pt, on_self = self.intersection(line, eps)
        if on_self and line.is_on_line(pt, eps):
            return pt
        return None


def is_on_line(a, b, eps: Optional[float] = None) -> bool:
    """is_on_line(line, point) or is_on_line(point, line)."""
    if isinstance(a, Line):
        return a.is_on_line(b, eps)
    return b.is_on_line(a, eps)


def intersection(line1: Line, line2: Line, eps: Optional[float] = None) -> Tuple[Point, bool]:
    return line1.intersection(line2, eps)
