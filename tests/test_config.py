import pytest
from polyiou import config
from polyiou.config import DEFAULT_EPS, get_eps, set_eps, resolve_eps
from polyiou.vector import Point

def test_default_eps():
    assert get_eps() == DEFAULT_EPS == 1e-6

def test_resolve_precedence():
    assert resolve_eps() == get_eps()
    assert resolve_eps(cfg={"eps": 0.01}) == 0.01
    assert resolve_eps(0.5, cfg={"eps": 0.01}) == 0.5
    assert resolve_eps(cfg={"eps": None}) == get_eps()

def test_set_eps_changes_point_equality():
    previous = set_eps(1e-2)
    try:
        assert get_eps() == 1e-2
        assert Point(0, 0) == Point(0.005, 0)
    finally:
        set_eps(previous)
    assert get_eps() == previous
    assert Point(0, 0) != Point(0.005, 0)

def test_bad_eps_rejected():
    for bad in (0, -1e-6, float("nan"), float("inf"), "abc", None):
        with pytest.raises(ValueError):
            set_eps(bad)
    with pytest.raises(ValueError):
        resolve_eps(cfg={"eps": -1})
    assert config.get_eps() == DEFAULT_EPS
