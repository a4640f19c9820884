"""
Two dimensional point and vector value type.

Point stores its coordinates in a fixed length tuple and exposes x and y as
named accessors over that storage, so both p.x and p[0] read the same value.
Points are immutable. Arithmetic returns new points.

Equality is tolerant: two points compare equal when both coordinate
differences are within the configured epsilon. Because tolerant equality is
not transitive, points are not hashable.
"""

from typing import Iterator, Optional, Tuple, Union
import math

from .config import resolve_eps
from .errors import DegenerateGeometryError

Number = Union[int, float]


class Point:
    """Immutable 2D point, also used as a free vector."""

    __slots__ = ("_d",)

    def __init__(self, x: Number = 0.0, y: Number = 0.0):
        object.__setattr__(self, "_d", (float(x), float(y)))

    @classmethod
    def from_any(cls, value) -> "Point":
        """
        Build a Point from a Point, an (x, y) pair or any length two sequence
        such as a numpy row.
        """
        if isinstance(value, Point):
            return value
        try:
            x, y = value
        except (TypeError, ValueError):
            raise ValueError(f"expected an (x, y) pair, got {value!r}")
        return cls(x, y)

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    # component access

    @property
    def x(self) -> float:
        return self._d[0]

    @property
    def y(self) -> float:
        return self._d[1]

    def __getitem__(self, i: int) -> float:
        assert i in (0, 1), f"component index out of range: {i}"
        return self._d[i]

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[float]:
        return iter(self._d)

    def as_tuple(self) -> Tuple[float, float]:
        return self._d

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"

    # comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        eps = resolve_eps()
        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def is_close(self, other: "Point", eps: Optional[float] = None) -> bool:
        """Tolerant equality with an explicit tolerance."""
        eps = resolve_eps(eps)
        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps

    def is_zero(self, eps: Optional[float] = None) -> bool:
        eps = resolve_eps(eps)
        return abs(self.x) <= eps and abs(self.y) <= eps

    def non_zero(self, eps: Optional[float] = None) -> bool:
        return not self.is_zero(eps)

    # arithmetic

    def __add__(self, p: "Point") -> "Point":
        return Point(self.x + p.x, self.y + p.y)

    def __sub__(self, p: "Point") -> "Point":
        return Point(self.x - p.x, self.y - p.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, t: Number) -> "Point":
        if isinstance(t, Point):
            return NotImplemented
        return Point(self.x * t, self.y * t)

    __rmul__ = __mul__

    def __truediv__(self, t: Number) -> "Point":
        return Point(self.x / t, self.y / t)

    def dmul(self, p: "Point") -> "Point":
        """Component wise product."""
        return Point(self.x * p.x, self.y * p.y)

    def ddiv(self, p: "Point") -> "Point":
        """Component wise quotient."""
        return Point(self.x / p.x, self.y / p.y)

    def dot(self, p: "Point") -> float:
        return self.x * p.x + self.y * p.y

    def cross(self, p: "Point") -> float:
        """Z component of the 3D cross product, positive when p is anticlockwise of self."""
        return self.x * p.y - self.y * p.x

    # metric

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self, eps: Optional[float] = None) -> "Point":
        if self.is_zero(eps):
            raise DegenerateGeometryError("cannot normalize a zero length vector")
        return self / self.norm()

    def distance(self, p: "Point") -> float:
        return (self - p).norm()

    def square_distance(self, p: "Point") -> float:
        return (self - p).norm_squared()

    def angle(self, r: "Point", eps: Optional[float] = None) -> float:
        """
        Unsigned angle between self and r in [0, pi].

        Raises DegenerateGeometryError when either vector has zero length.
        """
        if self.is_zero(eps) or r.is_zero(eps):
            raise DegenerateGeometryError("angle is undefined for a zero length vector")
        c = self.dot(r) / (self.norm() * r.norm())
        # rounding can push the cosine slightly outside [-1, 1]
        c = max(-1.0, min(1.0, c))
        return math.acos(c)

    def theta(self, eps: Optional[float] = None) -> float:
        """
        Polar angle of the vector in [0, 2 pi).

        Measured from the positive x axis, turning anticlockwise in a y up frame
        which is clockwise on screen where y points down.
        """
        ax = Point(1.0, 0.0)
        a = self.angle(ax, eps)
        if self.cross(ax) > 0.0:
            a = 2.0 * math.pi - a
        if a >= 2.0 * math.pi:
            a = 0.0
        return a


def distance(p1: Point, p2: Point) -> float:
    return p1.distance(p2)


def square_distance(p1: Point, p2: Point) -> float:
    return p1.square_distance(p2)


def angle(p1: Point, p2: Point, eps: Optional[float] = None) -> float:
    return p1.angle(p2, eps)
