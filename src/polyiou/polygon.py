"""
Convex polygon primitives.

A polygon is an ordered list of Point vertexes read as a closed loop. These
helpers work for any vertex count; the Quad class in polyiou.quad reuses them
for the four vertex case.

Winding convention
- the shoelace sum is positive for an anticlockwise loop in a y up frame
- a loop with fewer than three distinct points, or with signed area within
  eps of zero, has no winding

The functions trust that input loops are convex. is_convex and
validate_convex exist for callers that want to check first.
"""

from enum import Enum
from typing import Any, Iterator, List, Optional
import math
import numbers

import numpy as np

from .config import resolve_eps
from .errors import ConvexityError
from .line import Line
from .vector import Point

Vertexes = List[Point]


class WiseType(Enum):
    NONE = 0
    CLOCKWISE = 1
    ANTICLOCKWISE = 2


class LocPosition(Enum):
    OUTSIDE = 0
    ON_LINE = 1
    INSIDE = 2


def as_vertexes(polygon: Any) -> Vertexes:
    """
    Coerce polygon input into a list of Points.

    Accepted forms
    - a Quad or any object exposing vertexes()
    - a sequence of Points or (x, y) pairs
    - a numpy array of shape (N 2)
    - a flat sequence [x1 y1 x2 y2 ...] as used by COCO polygons

    Raises ValueError on anything else.
    """
    if polygon is None:
        raise ValueError("polygon is None")
    vertexes = getattr(polygon, "vertexes", None)
    if callable(vertexes):
        return list(vertexes())
    if isinstance(polygon, np.ndarray):
        arr = np.asarray(polygon, dtype=float)
        if arr.ndim == 1:
            return _pair_flat(arr.tolist())
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"expected an (N 2) array, got shape {arr.shape}")
        return [Point(x, y) for x, y in arr.tolist()]
    seq = list(polygon)
    if not seq:
        return []
    if all(isinstance(v, numbers.Real) for v in seq):
        return _pair_flat(seq)
    return [Point.from_any(v) for v in seq]


def _pair_flat(values: List[Any]) -> Vertexes:
    if len(values) % 2 != 0:
        raise ValueError(f"flat coordinate list must have even length, got {len(values)}")
    return [Point(values[i], values[i + 1]) for i in range(0, len(values), 2)]


def edges(vertexes: Vertexes) -> Iterator[Line]:
    """Yield the closing loop of edges, last vertex back to the first."""
    n = len(vertexes)
    for i in range(n):
        yield Line(vertexes[i], vertexes[(i + 1) % n])


def append_unique(points: Vertexes, p: Point, eps: Optional[float] = None) -> bool:
    """Append p unless a point within eps is already present. Returns True if added."""
    eps = resolve_eps(eps)
    for q in points:
        if q.is_close(p, eps):
            return False
    points.append(p)
    return True


def merge_unique(points: Vertexes, eps: Optional[float] = None) -> Vertexes:
    out: Vertexes = []
    for p in points:
        append_unique(out, p, eps)
    return out


def signed_area(polygon: Any) -> float:
    """Shoelace area, positive for anticlockwise loops."""
    verts = as_vertexes(polygon)
    n = len(verts)
    if n < 3:
        return 0.0
    s = 0.0
    for i in range(n):
        j = (i + 1) % n
        s += verts[i].x * verts[j].y - verts[j].x * verts[i].y
    return s / 2.0


def area(polygon: Any) -> float:
    return abs(signed_area(polygon))


def which_wise(polygon: Any, eps: Optional[float] = None) -> WiseType:
    eps = resolve_eps(eps)
    verts = as_vertexes(polygon)
    if len(merge_unique(verts, eps)) < 3:
        return WiseType.NONE
    s = signed_area(verts)
    if abs(s) <= eps:
        return WiseType.NONE
    return WiseType.ANTICLOCKWISE if s > 0.0 else WiseType.CLOCKWISE


def is_in_clockwise(polygon: Any, eps: Optional[float] = None) -> bool:
    return which_wise(polygon, eps) is WiseType.CLOCKWISE


def is_in_anticlockwise(polygon: Any, eps: Optional[float] = None) -> bool:
    return which_wise(polygon, eps) is WiseType.ANTICLOCKWISE


def be_in_some_wise(polygon: Any, wise_type: WiseType, eps: Optional[float] = None) -> Vertexes:
    """
    Return the vertex loop ordered in the requested winding.

    The loop is reversed when its winding differs from wise_type. Degenerate
    loops, and a NONE target, come back unchanged. The input is not modified.
    """
    verts = as_vertexes(polygon)
    current = which_wise(verts, eps)
    if current is WiseType.NONE or wise_type is WiseType.NONE or current is wise_type:
        return list(verts)
    return list(reversed(verts))


def be_in_clockwise(polygon: Any, eps: Optional[float] = None) -> Vertexes:
    return be_in_some_wise(polygon, WiseType.CLOCKWISE, eps)


def be_in_anticlockwise(polygon: Any, eps: Optional[float] = None) -> Vertexes:
    return be_in_some_wise(polygon, WiseType.ANTICLOCKWISE, eps)


def location(polygon: Any, p: Any, eps: Optional[float] = None) -> LocPosition:
    """
    Classify p against a convex polygon.

    Any edge within eps of p makes it ON_LINE. Otherwise p is INSIDE only when
    it lies strictly on the inner side of every edge for the polygon's own
    winding. Degenerate polygons have no inside. Repeated consecutive
    vertexes are ignored.
    """
    eps = resolve_eps(eps)
    verts = _drop_repeats(as_vertexes(polygon), eps)
    return _location(verts, Point.from_any(p), which_wise(verts, eps), eps)


def _location(verts: Vertexes, p: Point, wise: WiseType, eps: float) -> LocPosition:
    # verts must be free of repeats and wise must be the winding of verts
    if not verts:
        return LocPosition.OUTSIDE

    for edge in edges(verts):
        if edge.is_on_line(p, eps):
            return LocPosition.ON_LINE

    if wise is WiseType.NONE:
        return LocPosition.OUTSIDE
    sign = 1.0 if wise is WiseType.ANTICLOCKWISE else -1.0
    for edge in edges(verts):
        c = edge.direction().cross(p - edge.p1)
        if sign * c <= 0.0:
            return LocPosition.OUTSIDE
    return LocPosition.INSIDE


def inter_pts(polygon: Any, line: Line, eps: Optional[float] = None) -> Vertexes:
    """
    Points where the infinite line through `line` crosses the polygon boundary.

    Each edge is intersected with the cutting line and the crossing is kept
    when it falls on the edge. Edges parallel to the line contribute nothing.
    A crossing through a vertex is reported once.
    """
    eps = resolve_eps(eps)
    pts: Vertexes = []
    for edge in edges(as_vertexes(polygon)):
        if edge.is_parallel(line, eps):
            continue
        pt, on_edge = edge.intersection(line, eps)
        if on_edge:
            append_unique(pts, pt, eps)
    return pts


def _drop_repeats(verts: Vertexes, eps: float) -> Vertexes:
    out: Vertexes = []
    for v in verts:
        if not out or not out[-1].is_close(v, eps):
            out.append(v)
    while len(out) > 1 and out[-1].is_close(out[0], eps):
        out.pop()
    return out


def is_convex(polygon: Any, eps: Optional[float] = None) -> bool:
    """
    Check that the loop is a non degenerate convex polygon.

    Every turn must have the same sign, collinear vertexes allowed, and the
    turns must add up to a single revolution so that star shaped loops with
    consistent turns are rejected.
    """
    eps = resolve_eps(eps)
    verts = _drop_repeats(as_vertexes(polygon), eps)
    n = len(verts)
    if n < 3 or which_wise(verts, eps) is WiseType.NONE:
        return False
    sign = 0
    total = 0.0
    for i in range(n):
        e1 = verts[(i + 1) % n] - verts[i]
        e2 = verts[(i + 2) % n] - verts[(i + 1) % n]
        c = e1.cross(e2)
        total += math.atan2(c, e1.dot(e2))
        if abs(c) <= eps * e1.norm() * e2.norm():
            continue
        s = 1 if c > 0.0 else -1
        if sign == 0:
            sign = s
        elif s != sign:
            return False
    # a closed loop turns a whole number of times
    return round(abs(total) / (2.0 * math.pi)) == 1


def validate_convex(polygon: Any, eps: Optional[float] = None) -> Vertexes:
    """Return the vertex list, raising ConvexityError when it is not convex."""
    verts = as_vertexes(polygon)
    if not is_convex(verts, eps):
        raise ConvexityError(f"vertex loop is not a convex polygon: {verts!r}")
    return verts
