"""
Intersection of two convex polygons.

The intersection of two convex polygons is itself convex and its vertexes are
exactly
- the points where the two outlines cross
- the vertexes of each polygon that lie inside or on the other

Both sets are collected, merged without duplicates and sorted by polar angle
around their centroid, which gives a valid convex loop whose shoelace area is
the intersection area. Union area follows from inclusion exclusion, no union
polygon is ever built.

All functions take polygons in any form accepted by polygon.as_vertexes.
"""

from typing import Any, Optional
import logging

from .config import resolve_eps
from .polygon import (
    Vertexes,
    WiseType,
    LocPosition,
    append_unique,
    area,
    as_vertexes,
    be_in_clockwise,
    edges,
    _drop_repeats,
    _location,
    merge_unique,
    which_wise,
)
from .vector import Point

logger = logging.getLogger(__name__)


def find_inter_points(c1: Any, c2: Any, eps: Optional[float] = None) -> Vertexes:
    """
    Crossing points of the two outlines.

    Every edge of c1 is tested against every edge of c2 and a point is kept
    only when it lies on both finite edges. Parallel edge pairs are skipped,
    collinear overlaps are picked up by find_inner_points instead.
    """
    eps = resolve_eps(eps)
    verts1 = as_vertexes(c1)
    verts2 = as_vertexes(c2)
    pts: Vertexes = []
    for e1 in edges(verts1):
        for e2 in edges(verts2):
            pt = e1.segment_intersection(e2, eps)
            if pt is not None:
                append_unique(pts, pt, eps)
    return pts


def find_inner_points(c1: Any, c2: Any, eps: Optional[float] = None) -> Vertexes:
    """Vertexes of c1 inside or on c2, followed by vertexes of c2 inside or on c1."""
    eps = resolve_eps(eps)
    verts1 = _drop_repeats(as_vertexes(c1), eps)
    verts2 = _drop_repeats(as_vertexes(c2), eps)
    # one winding per polygon, shared by every location test
    wise1 = which_wise(verts1, eps)
    wise2 = which_wise(verts2, eps)
    pts: Vertexes = []
    for p in verts1:
        if _location(verts2, p, wise2, eps) is not LocPosition.OUTSIDE:
            append_unique(pts, p, eps)
    for p in verts2:
        if _location(verts1, p, wise1, eps) is not LocPosition.OUTSIDE:
            append_unique(pts, p, eps)
    return pts


def order_convex(points: Vertexes, eps: Optional[float] = None) -> Vertexes:
    """
    Sort an unordered convex point set into a boundary loop.

    Points are ordered by polar angle around their centroid, ties broken by
    distance from the centroid. A point sitting on the centroid sorts first.
    """
    eps = resolve_eps(eps)
    if len(points) < 3:
        return list(points)
    n = float(len(points))
    center = Point(sum(p.x for p in points) / n, sum(p.y for p in points) / n)

    def key(p: Point):
        offset = p - center
        if offset.is_zero(eps):
            return (0.0, 0.0)
        return (offset.theta(eps), offset.norm())

    return sorted(points, key=key)


def intersection_polygon(c1: Any, c2: Any, eps: Optional[float] = None) -> Vertexes:
    """
    Ordered vertex loop of the intersection of two convex polygons.

    Returns an empty list when the polygons do not overlap, or overlap only in
    a point or a segment, or when either input is degenerate.
    """
    eps = resolve_eps(eps)
    verts1 = as_vertexes(c1)
    verts2 = as_vertexes(c2)
    if which_wise(verts1, eps) is WiseType.NONE or which_wise(verts2, eps) is WiseType.NONE:
        logger.debug("Degenerate polygon in intersection, treating overlap as empty")
        return []
    verts1 = be_in_clockwise(verts1, eps)
    verts2 = be_in_clockwise(verts2, eps)

    merged = find_inter_points(verts1, verts2, eps)
    merged.extend(find_inner_points(verts1, verts2, eps))
    merged = merge_unique(merged, eps)
    if len(merged) < 3:
        return []
    return order_convex(merged, eps)


def area_intersection(c1: Any, c2: Any, eps: Optional[float] = None) -> float:
    return area(intersection_polygon(c1, c2, eps))


def area_union(c1: Any, c2: Any, eps: Optional[float] = None) -> float:
    """Union area as area(c1) + area(c2) - intersection, never negative."""
    verts1 = as_vertexes(c1)
    verts2 = as_vertexes(c2)
    union = area(verts1) + area(verts2) - area_intersection(verts1, verts2, eps)
    return max(0.0, union)


def iou(c1: Any, c2: Any, eps: Optional[float] = None) -> float:
    """
    Intersection over union of two convex polygons.

    Returns 0.0 when the union area is within eps of zero. The ratio is clamped
    to [0 1] to absorb rounding.
    """
    eps = resolve_eps(eps)
    verts1 = as_vertexes(c1)
    verts2 = as_vertexes(c2)
    inter = area_intersection(verts1, verts2, eps)
    union = area(verts1) + area(verts2) - inter
    if union <= eps:
        logger.debug("Union area %s within tolerance of zero, returning iou 0", union)
        return 0.0
    return max(0.0, min(1.0, inter / union))
