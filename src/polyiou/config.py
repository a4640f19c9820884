"""
Tolerance configuration for the geometry engine.

All geometric predicates compare against a single epsilon. The default works
for pixel scale coordinates. Callers working at a very different scale can
either replace the process wide default with set_eps or pass eps per call.
"""

from typing import Dict, Any, Optional
import math

DEFAULT_EPS = 1e-6

_eps = DEFAULT_EPS


def _check_eps(value: Any) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"eps must be a number, got {value!r}")
    if not math.isfinite(v) or v <= 0.0:
        raise ValueError(f"eps must be a positive finite number, got {value!r}")
    return v


def get_eps() -> float:
    """Return the process wide default tolerance."""
    return _eps


def set_eps(value: float) -> float:
    """
    Replace the process wide default tolerance.

    Returns the previous value so callers can restore it.
    """
    global _eps
    previous = _eps
    _eps = _check_eps(value)
    return previous


def resolve_eps(eps: Optional[float] = None, cfg: Optional[Dict[str, Any]] = None) -> float:
    """
    Resolve the tolerance for a single call.

    Order of precedence
    - explicit eps argument
    - cfg["eps"] when present
    - process wide default
    """
    if eps is not None:
        return _check_eps(eps)
    cfg = cfg or {}
    if cfg.get("eps") is not None:
        return _check_eps(cfg["eps"])
    return _eps
