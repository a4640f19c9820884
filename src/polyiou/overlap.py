"""
Batch overlap utilities.

Pairwise IoU over a list of convex polygons, threshold based pair search and
greedy one to one matching. Polygon clipping is the expensive step so pairs
whose axis aligned bounds do not overlap are dropped first with a vectorized
bounds test.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

import numpy as np

from . import clipping
from .config import resolve_eps
from .polygon import as_vertexes

logger = logging.getLogger(__name__)


def polygon_bounds(polygons: Sequence[Any]) -> np.ndarray:
    """
    Axis aligned bounds for each polygon.

    Returns numpy array shape (N 4) each row xmin ymin xmax ymax. Empty
    polygons get a row of nan so they never pass the bounds test.
    """
    out = np.full((len(polygons), 4), np.nan, dtype=float)
    for i, poly in enumerate(polygons):
        verts = as_vertexes(poly)
        if not verts:
            continue
        arr = np.array([v.as_tuple() for v in verts], dtype=float)
        out[i, 0:2] = arr.min(axis=0)
        out[i, 2:4] = arr.max(axis=0)
    return out


def bounds_overlap_matrix(bounds: np.ndarray, eps: float = 0.0) -> np.ndarray:
    """
    NxN boolean matrix, True where two bounding boxes overlap with positive area.

    Touching boxes share no area so they are reported as not overlapping.
    """
    if bounds.size == 0:
        return np.zeros((0, 0), dtype=bool)
    inter_x1 = np.maximum(bounds[:, None, 0], bounds[None, :, 0])
    inter_y1 = np.maximum(bounds[:, None, 1], bounds[None, :, 1])
    inter_x2 = np.minimum(bounds[:, None, 2], bounds[None, :, 2])
    inter_y2 = np.minimum(bounds[:, None, 3], bounds[None, :, 3])
    # nan rows compare False everywhere
    return (inter_x2 - inter_x1 > eps) & (inter_y2 - inter_y1 > eps)


def iou_matrix(polygons: Sequence[Any], cfg: Optional[Dict[str, Any]] = None) -> np.ndarray:
    """
    Compute the full pairwise IoU matrix for polygons.

    cfg optional keys:
    - eps tolerance, defaults to the process wide value
    - prefilter skip pairs with disjoint bounds, default True

    Returns
    NxN symmetric numpy array. Diagonal is 1.0 for non degenerate polygons.
    """
    cfg = cfg or {}
    eps = resolve_eps(cfg=cfg)
    prefilter = cfg.get("prefilter", True)

    verts = [as_vertexes(p) for p in polygons]
    n = len(verts)
    mat = np.zeros((n, n), dtype=float)
    if n == 0:
        return mat
    if prefilter:
        candidates = bounds_overlap_matrix(polygon_bounds(verts), eps)
    else:
        candidates = np.ones((n, n), dtype=bool)

    skipped = 0
    for i in range(n):
        mat[i, i] = clipping.iou(verts[i], verts[i], eps)
        for j in range(i + 1, n):
            if not candidates[i, j]:
                skipped += 1
                continue
            val = clipping.iou(verts[i], verts[j], eps)
            mat[i, j] = val
            mat[j, i] = val
    if skipped:
        logger.debug("Bounds prefilter skipped %d of %d pairs", skipped, n * (n - 1) // 2)
    return mat


def find_high_iou_pairs(polygons: Sequence[Any], labels: Optional[Sequence[Any]] = None, cfg: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    Find pairs of polygons with IoU above threshold.

    cfg optional keys:
    - threshold float IoU threshold, default 0.5
    - max_pairs int maximum number of pairs to return, default 200
    - eps and prefilter as for iou_matrix

    Returns
    list of dicts with keys:
    - i j indexes
    - iou value
    - label_i label_j
    """
    cfg = cfg or {}
    threshold = float(cfg.get("threshold", 0.5))
    max_pairs = int(cfg.get("max_pairs", 200))
    labels = list(labels) if labels is not None else []
    if len(polygons) == 0:
        return []
    mat = iou_matrix(polygons, cfg)
    n = mat.shape[0]
    pairs = []
    for i in range(n):
        for j in range(i + 1, n):
            val = float(mat[i, j])
            if val >= threshold:
                pairs.append({
                    "i": i,
                    "j": j,
                    "iou": val,
                    "label_i": labels[i] if i < len(labels) else None,
                    "label_j": labels[j] if j < len(labels) else None,
                })
                if len(pairs) >= max_pairs:
                    return pairs
    return pairs


def match_polygons(preds: Sequence[Any], targets: Sequence[Any], cfg: Optional[Dict[str, Any]] = None) -> List[Tuple[int, int, float]]:
    """
    Greedy one to one matching of predictions to targets by IoU.

    Candidate pairs are taken in order of decreasing IoU and accepted when
    neither side is matched yet and the IoU reaches threshold.

    cfg optional keys:
    - threshold float minimum IoU for a match, default 0.5
    - eps tolerance

    Returns list of (pred_index, target_index, iou) sorted by pred_index.
    """
    cfg = cfg or {}
    threshold = float(cfg.get("threshold", 0.5))
    eps = resolve_eps(cfg=cfg)
    pred_verts = [as_vertexes(p) for p in preds]
    target_verts = [as_vertexes(t) for t in targets]
    if not pred_verts or not target_verts:
        return []

    bounds = np.vstack([polygon_bounds(pred_verts), polygon_bounds(target_verts)])
    overlap = bounds_overlap_matrix(bounds, eps)
    n_pred = len(pred_verts)

    candidates = []
    for i, pv in enumerate(pred_verts):
        for j, tv in enumerate(target_verts):
            if not overlap[i, n_pred + j]:
                continue
            val = clipping.iou(pv, tv, eps)
            if val >= threshold and val > 0.0:
                candidates.append((val, i, j))
    # stable order for equal scores
    candidates.sort(key=lambda c: (-c[0], c[1], c[2]))

    used_pred = set()
    used_target = set()
    matches = []
    for val, i, j in candidates:
        if i in used_pred or j in used_target:
            continue
        used_pred.add(i)
        used_target.add(j)
        matches.append((i, j, val))
    return sorted(matches)
