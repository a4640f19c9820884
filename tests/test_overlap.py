import math
import numpy as np
from polyiou.overlap import (
    polygon_bounds, bounds_overlap_matrix, iou_matrix, find_high_iou_pairs, match_polygons,
)
from polyiou.quad import Quad

UNIT = [(0, 0), (1, 0), (1, 1), (0, 1)]

def shifted(dx, dy=0.0):
    return [(x + dx, y + dy) for x, y in UNIT]

def test_polygon_bounds():
    b = polygon_bounds([UNIT, [(2, 3), (4, 3), (3, 5)], []])
    assert b.shape == (3, 4)
    assert list(b[0]) == [0, 0, 1, 1]
    assert list(b[1]) == [2, 3, 4, 5]
    assert np.isnan(b[2]).all()

def test_bounds_overlap_matrix():
    b = polygon_bounds([UNIT, shifted(0.5), shifted(1.0), shifted(3.0)])
    m = bounds_overlap_matrix(b)
    assert m[0, 1] and m[1, 0]
    # touching boxes share no area
    assert not m[0, 2]
    assert not m[0, 3]
    assert bounds_overlap_matrix(np.zeros((0, 4))).shape == (0, 0)

def test_iou_matrix():
    polys = [UNIT, shifted(0.5), shifted(3.0), Quad.from_bbox(0, 0, 1, 1)]
    mat = iou_matrix(polys)
    assert mat.shape == (4, 4)
    assert np.allclose(mat, mat.T)
    assert np.allclose(np.diag(mat), 1.0)
    assert math.isclose(mat[0, 1], 1.0 / 3.0)
    assert mat[0, 2] == 0.0
    assert math.isclose(mat[0, 3], 1.0)
    assert np.allclose(iou_matrix(polys, {"prefilter": False}), mat)
    assert iou_matrix([]).shape == (0, 0)

def test_degenerate_polygon_has_zero_diagonal():
    mat = iou_matrix([[(0, 0), (1, 1), (2, 2)], UNIT])
    assert mat[0, 0] == 0.0
    assert mat[1, 1] == 1.0

def test_find_high_iou_pairs():
    polys = [UNIT, shifted(0.1), shifted(0.3), shifted(5.0)]
    pairs = find_high_iou_pairs(polys, labels=["a", "b", "c", "d"], cfg={"threshold": 0.5})
    assert [(p["i"], p["j"]) for p in pairs] == [(0, 1), (0, 2), (1, 2)]
    assert pairs[0]["label_i"] == "a" and pairs[0]["label_j"] == "b"
    assert math.isclose(pairs[0]["iou"], 0.9 / 1.1)
    capped = find_high_iou_pairs(polys, cfg={"threshold": 0.1, "max_pairs": 1})
    assert len(capped) == 1
    assert capped[0]["label_i"] is None
    assert find_high_iou_pairs([]) == []

def test_match_polygons_greedy():
    preds = [shifted(0.5), shifted(0.05), shifted(10.0)]
    targets = [UNIT, shifted(0.6)]
    matches = match_polygons(preds, targets, {"threshold": 0.3})
    assert [(i, j) for i, j, _ in matches] == [(0, 1), (1, 0)]
    assert math.isclose(matches[1][2], 0.95 / 1.05)
    assert match_polygons(preds, []) == []
    assert match_polygons(preds, targets, {"threshold": 0.99}) == []

def test_numpy_polygon_stack():
    polys = np.array([UNIT, shifted(0.1), shifted(5.0)], dtype=float)
    assert polys.shape == (3, 4, 2)
    pairs = find_high_iou_pairs(polys)
    assert [(p["i"], p["j"]) for p in pairs] == [(0, 1)]
    assert math.isclose(pairs[0]["iou"], 0.9 / 1.1)
    assert find_high_iou_pairs(np.zeros((0, 4, 2))) == []
