"""
Quad, a convex quadrilateral.

Quad is the four vertex case of a convex polygon, the shape of an oriented
bounding box. Vertexes live in indexed storage and p1..p4 are named accessors
over it. Unlike the generic helpers, flip and be_in_some_wise reorder the quad
in place since a Quad is owned by the caller that asks for the reorder.
"""

from typing import Any, List, Optional, Sequence

from . import polygon
from .config import resolve_eps
from .line import Line
from .polygon import LocPosition, Vertexes, WiseType
from .vector import Point


class Quad:
    """Four vertex convex polygon."""

    __slots__ = ("_vert",)

    def __init__(self, p1: Any = None, p2: Any = None, p3: Any = None, p4: Any = None):
        self._vert: List[Point] = [Point() if p is None else Point.from_any(p) for p in (p1, p2, p3, p4)]

    @classmethod
    def from_points(cls, points: Sequence[Any]) -> "Quad":
        verts = polygon.as_vertexes(points)
        if len(verts) != 4:
            raise ValueError(f"a quad needs exactly 4 vertexes, got {len(verts)}")
        return cls(*verts)

    @classmethod
    def from_flat(cls, values: Sequence[float]) -> "Quad":
        """Build from [x1 y1 x2 y2 x3 y3 x4 y4], the usual oriented box layout."""
        if len(values) != 8:
            raise ValueError(f"expected 8 coordinates, got {len(values)}")
        return cls.from_points(list(values))

    @classmethod
    def from_bbox(cls, xmin: float, ymin: float, xmax: float, ymax: float) -> "Quad":
        """Axis aligned box in xyxy form. Inverted coordinates are swapped."""
        if xmin > xmax:
            xmin, xmax = xmax, xmin
        if ymin > ymax:
            ymin, ymax = ymax, ymin
        return cls((xmin, ymin), (xmax, ymin), (xmax, ymax), (xmin, ymax))

    # storage access

    def __getitem__(self, i: int) -> Point:
        assert 0 <= i < 4, f"vertex index out of range: {i}"
        return self._vert[i]

    def __setitem__(self, i: int, p: Any):
        assert 0 <= i < 4, f"vertex index out of range: {i}"
        self._vert[i] = Point.from_any(p)

    def __len__(self) -> int:
        return 4

    def __iter__(self):
        return iter(self._vert)

    def __repr__(self) -> str:
        return "Quad({!r}, {!r}, {!r}, {!r})".format(*self._vert)

    @property
    def p1(self) -> Point:
        return self._vert[0]

    @property
    def p2(self) -> Point:
        return self._vert[1]

    @property
    def p3(self) -> Point:
        return self._vert[2]

    @property
    def p4(self) -> Point:
        return self._vert[3]

    def vertexes(self) -> Vertexes:
        """Copy of the vertex list."""
        return list(self._vert)

    # checks and reorders

    def have_repeat_vert(self, eps: Optional[float] = None) -> bool:
        """True when any two of the four vertexes coincide within eps."""
        eps = resolve_eps(eps)
        for i in range(4):
            for j in range(i + 1, 4):
                if self._vert[i].is_close(self._vert[j], eps):
                    return True
        return False

    def flip(self) -> "Quad":
        """
        Swap the second and fourth vertex.

        The loop is walked the other way round with p1 kept in place, so a
        convex quad changes winding. Quads assembled from two independently
        ordered vertex pairs often need this before they are used.
        """
        self._vert[1], self._vert[3] = self._vert[3], self._vert[1]
        return self

    def area(self) -> float:
        return polygon.area(self._vert)

    def which_wise(self, eps: Optional[float] = None) -> WiseType:
        return polygon.which_wise(self._vert, eps)

    def is_in_clockwise(self, eps: Optional[float] = None) -> bool:
        return self.which_wise(eps) is WiseType.CLOCKWISE

    def is_in_anticlockwise(self, eps: Optional[float] = None) -> bool:
        return self.which_wise(eps) is WiseType.ANTICLOCKWISE

    def be_in_some_wise(self, wise_type: WiseType, eps: Optional[float] = None) -> "Quad":
        current = self.which_wise(eps)
        if current is WiseType.NONE or wise_type is WiseType.NONE or current is wise_type:
            return self
        return self.flip()

    def be_in_clockwise(self, eps: Optional[float] = None) -> "Quad":
        return self.be_in_some_wise(WiseType.CLOCKWISE, eps)

    def be_in_anticlockwise(self, eps: Optional[float] = None) -> "Quad":
        return self.be_in_some_wise(WiseType.ANTICLOCKWISE, eps)

    def location(self, p: Any, eps: Optional[float] = None) -> LocPosition:
        return polygon.location(self._vert, p, eps)

    def inter_pts(self, line: Line, eps: Optional[float] = None) -> Vertexes:
        return polygon.inter_pts(self._vert, line, eps)

    def is_convex(self, eps: Optional[float] = None) -> bool:
        return polygon.is_convex(self._vert, eps)


def as_quad(value: Any) -> Quad:
    """Coerce a Quad, four points or eight flat coordinates into a Quad."""
    if isinstance(value, Quad):
        return value
    return Quad.from_points(value)
