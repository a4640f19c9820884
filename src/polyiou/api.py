"""
Top level function surface for polyiou.

Two call surfaces with the same semantics
- generic functions take any convex polygon, as a list of points, (x, y)
  pairs, a flat coordinate list or an (N 2) numpy array
- quad_* functions take Quad instances, four points or eight flat
  coordinates, and insist on exactly four vertexes

Nothing here keeps state between calls. Polygons passed in are never modified.
Pass validate=True to reject non convex input with ConvexityError instead of
trusting it.
"""

from typing import Any, Optional, Tuple, Union

from . import clipping
from . import polygon
from .polygon import LocPosition, Vertexes, WiseType
from .quad import Quad, as_quad
from .vector import Point


def _prepare(c1: Any, c2: Any, validate: bool, eps: Optional[float]) -> Tuple[Vertexes, Vertexes]:
    verts1 = polygon.as_vertexes(c1)
    verts2 = polygon.as_vertexes(c2)
    if validate:
        polygon.validate_convex(verts1, eps)
        polygon.validate_convex(verts2, eps)
    return verts1, verts2


def area(c: Any) -> float:
    """Non negative shoelace area."""
    return polygon.area(c)


def winding(c: Any, eps: Optional[float] = None) -> WiseType:
    return polygon.which_wise(c, eps)


def normalize_winding(c: Any, target: Union[WiseType, str], eps: Optional[float] = None) -> Vertexes:
    """
    Return a vertex list in the target winding.

    target is a WiseType or one of the strings "clockwise" and
    "anticlockwise". Calling it twice gives the same result as once.
    """
    if isinstance(target, str):
        try:
            target = WiseType[target.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown winding {target!r}")
    return polygon.be_in_some_wise(c, target, eps)


def locate(c: Any, p: Any, eps: Optional[float] = None) -> LocPosition:
    return polygon.location(c, Point.from_any(p), eps)


def intersection_area(c1: Any, c2: Any, eps: Optional[float] = None, validate: bool = False) -> float:
    verts1, verts2 = _prepare(c1, c2, validate, eps)
    return clipping.area_intersection(verts1, verts2, eps)


def union_area(c1: Any, c2: Any, eps: Optional[float] = None, validate: bool = False) -> float:
    verts1, verts2 = _prepare(c1, c2, validate, eps)
    return clipping.area_union(verts1, verts2, eps)


def iou(c1: Any, c2: Any, eps: Optional[float] = None, validate: bool = False) -> float:
    """
    Intersection over union of two convex polygons, in [0 1].

    Returns 0.0 when both polygons are degenerate and the union is empty.
    """
    verts1, verts2 = _prepare(c1, c2, validate, eps)
    return clipping.iou(verts1, verts2, eps)


def intersection_polygon(c1: Any, c2: Any, eps: Optional[float] = None, validate: bool = False) -> Vertexes:
    """Ordered vertex loop of the overlap, empty when there is none."""
    verts1, verts2 = _prepare(c1, c2, validate, eps)
    return clipping.intersection_polygon(verts1, verts2, eps)


# quad surface

def quad_intersection_area(q1: Any, q2: Any, eps: Optional[float] = None, validate: bool = False) -> float:
    return intersection_area(as_quad(q1), as_quad(q2), eps, validate)


def quad_union_area(q1: Any, q2: Any, eps: Optional[float] = None, validate: bool = False) -> float:
    return union_area(as_quad(q1), as_quad(q2), eps, validate)


def quad_iou(q1: Any, q2: Any, eps: Optional[float] = None, validate: bool = False) -> float:
    """IoU of two quads, e.g. oriented bounding boxes."""
    return iou(as_quad(q1), as_quad(q2), eps, validate)


def quad_find_inter_points(q1: Any, q2: Any, eps: Optional[float] = None) -> Vertexes:
    return clipping.find_inter_points(as_quad(q1), as_quad(q2), eps)


def quad_find_inner_points(q1: Any, q2: Any, eps: Optional[float] = None) -> Vertexes:
    return clipping.find_inner_points(as_quad(q1), as_quad(q2), eps)


__all__ = [
    "Point",
    "Quad",
    "WiseType",
    "LocPosition",
    "area",
    "winding",
    "normalize_winding",
    "locate",
    "intersection_area",
    "union_area",
    "iou",
    "intersection_polygon",
    "quad_intersection_area",
    "quad_union_area",
    "quad_iou",
    "quad_find_inter_points",
    "quad_find_inner_points",
]
